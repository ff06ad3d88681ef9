"""
Yahtzee Engine - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import itertools

import pytest


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def lower_section_hands() -> dict[str, tuple[tuple[int, ...], dict[str, int]]]:
    """
    Hand patterns with their expected lower-section scores.

    Returns:
        Dict mapping name to (dice_values, {rule_name: expected_points})
    """
    return {
        "full_house": ((2, 2, 3, 3, 3), {
            "three_of_kind": 13,
            "four_of_kind": 0,
            "full_house": 25,
            "small_straight": 0,
            "large_straight": 0,
            "yahtzee": 0,
            "chance": 13,
        }),
        "yahtzee_of_sixes": ((6, 6, 6, 6, 6), {
            "three_of_kind": 30,
            "four_of_kind": 30,
            "full_house": 0,
            "small_straight": 0,
            "large_straight": 0,
            "yahtzee": 50,
            "chance": 30,
        }),
        "low_large_straight": ((1, 2, 3, 4, 5), {
            "three_of_kind": 0,
            "four_of_kind": 0,
            "full_house": 0,
            "small_straight": 30,
            "large_straight": 40,
            "yahtzee": 0,
            "chance": 15,
        }),
        "small_straight_with_pair": ((1, 2, 3, 4, 4), {
            "three_of_kind": 0,
            "four_of_kind": 0,
            "full_house": 0,
            "small_straight": 30,
            "large_straight": 0,
            "yahtzee": 0,
            "chance": 14,
        }),
        "four_of_a_kind": ((5, 5, 1, 5, 5), {
            "three_of_kind": 21,
            "four_of_kind": 21,
            "full_house": 0,
            "small_straight": 0,
            "large_straight": 0,
            "yahtzee": 0,
            "chance": 21,
        }),
        "nothing": ((1, 2, 3, 5, 6), {
            "three_of_kind": 0,
            "four_of_kind": 0,
            "full_house": 0,
            "small_straight": 0,
            "large_straight": 0,
            "yahtzee": 0,
            "chance": 17,
        }),
    }


@pytest.fixture(scope="session")
def all_hands() -> list[tuple[int, ...]]:
    """Every possible ordered five-dice hand (6^5 = 7776)."""
    return list(itertools.product(range(1, 7), repeat=5))


@pytest.fixture
def invalid_hands() -> list[tuple]:
    """Dice sequences that are not valid hands."""
    return [
        (),
        (1, 2, 3, 4),
        (1, 2, 3, 4, 5, 6),
        (0, 1, 2, 3, 4),
        (1, 2, 3, 4, 7),
        (-1, 2, 3, 4, 5),
        (1, 2, 3, 4, "5"),
        (1, 2, 3, 4, 2.0),
    ]
