"""Tests for weighted random selection."""
import random

import pytest

from symbol_quest.services.sampler import weighted_choice


class TestWeightedChoice:
    """Tests for weighted_choice."""

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            weighted_choice([])

    def test_zero_draw_picks_first_positive_item(self, fixed_random):
        items = [("a", 0.0), ("b", 1.0), ("c", 1.0)]

        assert weighted_choice(items, fixed_random(0.0)) == "b"

    def test_walks_cumulative_weights(self, fixed_random):
        items = [("a", 1.0), ("b", 2.0), ("c", 1.0)]

        # total 4: 0.2 -> 0.8 (a), 0.5 -> 2.0 (b), 0.9 -> 3.6 (c)
        assert weighted_choice(items, fixed_random(0.2)) == "a"
        assert weighted_choice(items, fixed_random(0.5)) == "b"
        assert weighted_choice(items, fixed_random(0.9)) == "c"

    def test_zero_weight_items_never_chosen(self):
        items = [("a", 1.0), ("never", 0.0), ("c", 1.0)]
        rng = random.Random(3)

        picks = {weighted_choice(items, rng) for _ in range(500)}

        assert picks == {"a", "c"}

    def test_all_zero_weights_fall_back_to_last(self, fixed_random):
        assert weighted_choice([("a", 0.0), ("b", 0.0)], fixed_random(0.3)) == "b"

    def test_frequencies_follow_weights(self):
        rng = random.Random(42)
        items = [("light", 1.0), ("heavy", 3.0)]

        picks = [weighted_choice(items, rng) for _ in range(10000)]

        assert picks.count("heavy") / len(picks) == pytest.approx(0.75, abs=0.03)
