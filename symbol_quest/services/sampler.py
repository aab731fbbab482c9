"""Weighted random selection."""
import random
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def weighted_choice(
    weighted_items: Sequence[Tuple[T, float]],
    rng: Optional[random.Random] = None,
) -> T:
    """
    Pick one item with probability proportional to its weight.

    Walks the list subtracting weights from a uniform draw in
    [0, total). Items with zero or negative weight are never picked by the
    walk; if floating point drift (or an all-zero list) exhausts the walk,
    the last item is returned.

    Args:
        weighted_items: Ordered (item, weight) pairs
        rng: Random source, module-level `random` when omitted

    Returns:
        Selected item

    Raises:
        ValueError: If weighted_items is empty
    """
    if not weighted_items:
        raise ValueError("Cannot select from an empty list")

    source = rng or random
    total = sum(max(weight, 0.0) for _, weight in weighted_items)
    remaining = source.random() * total

    for item, weight in weighted_items:
        if weight <= 0:
            continue
        remaining -= weight
        if remaining <= 0:
            return item

    return weighted_items[-1][0]
