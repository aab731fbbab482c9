"""Tests for the deck catalog."""
import json

import pytest

from symbol_quest.models.card import Card
from symbol_quest.models.enums import Mood
from symbol_quest.repositories.card_catalog import DECK_SIZE, CardCatalog, CatalogError


class TestBundledDeck:
    """The packaged major arcana dataset."""

    def test_has_22_cards_with_ids_0_to_21(self, catalog):
        assert len(catalog) == DECK_SIZE
        assert [card.id for card in catalog] == list(range(22))

    def test_every_card_weights_every_mood(self, catalog):
        for card in catalog:
            for mood in Mood.values():
                assert card.mood_weight(mood) > 0, f"{card.name} missing {mood}"

    def test_every_card_has_keywords_and_meaning(self, catalog):
        for card in catalog:
            assert card.keywords
            assert card.traditional_meaning
            assert card.number

    def test_lookup_by_id_and_name(self, catalog):
        assert catalog.get(17).name == "The Star"
        assert catalog.get(22) is None
        assert catalog.get_by_name("the star").id == 17
        assert catalog.get_by_name("Nope") is None
        assert 0 in catalog
        assert 99 not in catalog


class TestCatalogValidation:
    """Tests for CardCatalog construction."""

    def test_rejects_wrong_size(self):
        with pytest.raises(CatalogError, match="22 cards"):
            CardCatalog([Card(id=0, name="Only")])

    def test_rejects_duplicate_ids(self):
        cards = [Card(id=i, name=str(i)) for i in range(21)] + [Card(id=0, name="dup")]

        with pytest.raises(CatalogError, match="duplicate"):
            CardCatalog(cards)

    def test_sorts_by_id(self):
        cards = [Card(id=i, name=str(i)) for i in reversed(range(22))]

        catalog = CardCatalog(cards)

        assert catalog.all()[0].id == 0

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot load"):
            CardCatalog.from_file(str(tmp_path / "missing.json"))

    def test_from_file_malformed(self, tmp_path):
        path = tmp_path / "deck.json"
        path.write_text(json.dumps({"cards": [{"name": "no id"}]}))

        with pytest.raises(CatalogError, match="Malformed"):
            CardCatalog.from_file(str(path))
