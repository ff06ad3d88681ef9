"""
Yahtzee Engine - Dice Statistics

Pure helpers computing aggregate facts about a hand. Every function accepts
a Hand or any plain sequence of face values and never mutates its input.
"""

from collections import Counter
from typing import Iterable


def dice_sum(dice: Iterable[int]) -> int:
    """Total of all dice."""
    return sum(dice)


def count_of(dice: Iterable[int], value: int) -> int:
    """Number of dice showing ``value``."""
    return sum(1 for d in dice if d == value)


def frequencies(dice: Iterable[int]) -> tuple[int, ...]:
    """
    Occurrence counts of each distinct face present.

    ``(2, 2, 2, 5, 5)`` gives ``(3, 2)``. Order carries no meaning;
    callers only test membership or the maximum.
    """
    return tuple(Counter(dice).values())


def distinct_faces(dice: Iterable[int]) -> frozenset[int]:
    """Set of face values present in the hand."""
    return frozenset(dice)
