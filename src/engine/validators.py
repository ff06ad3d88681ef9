"""
Yahtzee Engine - Input Validation Utilities

Provides validation functions for rule engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.errors import InvalidHand

NUM_DICE = 5
MIN_FACE = 1
MAX_FACE = 6


def validate_hand(values: Sequence[int]) -> tuple[int, ...]:
    """
    Validate and normalize the dice values of a hand.

    Args:
        values: Sequence of dice values to validate

    Returns:
        Validated values as a tuple

    Raises:
        InvalidHand: If the count or any value is wrong
    """
    if values is None:
        raise InvalidHand(f"Exactly {NUM_DICE} dice required, got none.")

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count != NUM_DICE:
        raise InvalidHand(f"Exactly {NUM_DICE} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        # bool is an int subclass but never a die face
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidHand(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise InvalidHand(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_held_indices(
    indices: Sequence[int] | frozenset[int] | set[int],
    dice_count: int = NUM_DICE
) -> frozenset[int]:
    """
    Validate indices of held dice.

    Args:
        indices: Collection of dice indices that are held
        dice_count: Total number of dice in the hand

    Returns:
        Validated indices as a frozenset

    Raises:
        ValueError: If any index is out of range
    """
    if not indices:
        return frozenset()

    indices_set = frozenset(indices)

    for idx in indices_set:
        if not isinstance(idx, int) or isinstance(idx, bool):
            raise ValueError(f"Held index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise ValueError(
                f"Held index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )

    return indices_set
