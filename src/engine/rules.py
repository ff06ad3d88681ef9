"""
Yahtzee Engine - Rule Evaluation

Strategy functions for each RuleKind and the stateless evaluator that
dispatches a Rule to its strategy.

Scoring Rules:
    - Single-Value Total: face x number of dice showing that face
    - Distribution Sum: sum of all dice if any face appears min_count times
    - Full House: award for a three of a kind plus a pair
    - Small Straight: award for four consecutive faces
    - Large Straight: award for five consecutive faces
    - Yahtzee: award when all five dice match
"""

import logging
from typing import Callable, Sequence

from src.engine.base import Hand, Rule, RuleKind
from src.engine.catalog import RULES
from src.engine.stats import count_of, dice_sum, distinct_faces, frequencies

logger = logging.getLogger(__name__)

SMALL_STRAIGHT_RUNS = (
    frozenset({1, 2, 3, 4}),
    frozenset({2, 3, 4, 5}),
    frozenset({3, 4, 5, 6}),
)


def _single_value_total(rule: Rule, hand: Hand) -> int:
    return rule.face * count_of(hand, rule.face)


def _distribution_sum(rule: Rule, hand: Hand) -> int:
    if rule.min_count == 0:
        return dice_sum(hand)
    if any(c >= rule.min_count for c in frequencies(hand)):
        return dice_sum(hand)
    return 0


def _full_house(rule: Rule, hand: Hand) -> int:
    # Five of a kind gives (5,), which holds neither a 2 nor a 3.
    freqs = frequencies(hand)
    return rule.award if 2 in freqs and 3 in freqs else 0


def _small_straight(rule: Rule, hand: Hand) -> int:
    faces = distinct_faces(hand)
    return rule.award if any(run <= faces for run in SMALL_STRAIGHT_RUNS) else 0


def _large_straight(rule: Rule, hand: Hand) -> int:
    # Five distinct faces out of six are consecutive unless both ends appear.
    faces = distinct_faces(hand)
    if len(faces) == 5 and not (1 in faces and 6 in faces):
        return rule.award
    return 0


def _yahtzee(rule: Rule, hand: Hand) -> int:
    return rule.award if len(distinct_faces(hand)) == 1 else 0


STRATEGIES: dict[RuleKind, Callable[[Rule, Hand], int]] = {
    RuleKind.SINGLE_VALUE_TOTAL: _single_value_total,
    RuleKind.DISTRIBUTION_SUM: _distribution_sum,
    RuleKind.FULL_HOUSE: _full_house,
    RuleKind.SMALL_STRAIGHT: _small_straight,
    RuleKind.LARGE_STRAIGHT: _large_straight,
    RuleKind.YAHTZEE: _yahtzee,
}


def evaluate(rule: Rule, hand: Hand | Sequence[int]) -> int:
    """
    Score a hand against a single rule.

    Args:
        rule: Rule from the catalog (or any well-formed Rule)
        hand: Hand, or a raw sequence of five dice values

    Returns:
        Non-negative score

    Raises:
        InvalidHand: If a raw sequence is not a valid hand
    """
    if not isinstance(hand, Hand):
        hand = Hand.from_sequence(hand)

    score = STRATEGIES[rule.kind](rule, hand)
    logger.debug("Rule %s on [%s] -> %d", rule.name, hand, score)
    return score


def evaluate_all(hand: Hand | Sequence[int]) -> dict[str, int]:
    """Candidate score for every catalog rule, in catalog order."""
    if not isinstance(hand, Hand):
        hand = Hand.from_sequence(hand)
    return {rule.name: evaluate(rule, hand) for rule in RULES}
