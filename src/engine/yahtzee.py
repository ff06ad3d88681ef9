"""
Yahtzee Engine - Game Facade

Stateless entry point for the game loop: rolls dice (keeping held dice),
scores a hand against one rule or the whole catalog, and picks the best
open rule for a hand.

All methods are stateless class methods that operate on immutable inputs.
"""

import logging
import random
from typing import Sequence

from src.engine.base import Hand, Rule
from src.engine.catalog import RULES, get_rule
from src.engine.rules import evaluate, evaluate_all
from src.engine.scoresheet import ScoreSheet
from src.engine.validators import MAX_FACE, MIN_FACE, NUM_DICE, validate_held_indices

logger = logging.getLogger(__name__)


class YahtzeeEngine:
    """
    Stateless engine for a five-dice Yahtzee game.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    NUM_DICE = NUM_DICE

    @classmethod
    def roll_dice(
        cls,
        previous: Hand | None = None,
        held: Sequence[int] | frozenset[int] | set[int] = frozenset(),
        rng: random.Random | None = None,
    ) -> Hand:
        """
        Roll the dice, keeping any held dice from the previous hand.

        Args:
            previous: Hand from the last roll this turn (None on first roll)
            held: Indices of dice in ``previous`` to keep
            rng: Optional random source (for reproducible tests)

        Returns:
            New Hand

        Raises:
            ValueError: If dice are held without a previous hand, or an
                index is out of range
        """
        held_set = validate_held_indices(held, cls.NUM_DICE)
        if held_set and previous is None:
            raise ValueError("Cannot hold dice before the first roll.")

        randint = (rng or random).randint
        values = tuple(
            previous[i] if i in held_set else randint(MIN_FACE, MAX_FACE)
            for i in range(cls.NUM_DICE)
        )
        logger.debug("Rolled %s (held %s)", values, sorted(held_set))
        return Hand(values=values)

    @classmethod
    def calculate_score(cls, rule: Rule | str, dice: Hand | Sequence[int]) -> int:
        """
        Score dice against one rule.

        Args:
            rule: Rule object or catalog rule name
            dice: Hand or raw sequence of five values

        Returns:
            Non-negative score
        """
        if isinstance(rule, str):
            rule = get_rule(rule)
        return evaluate(rule, dice)

    @classmethod
    def score_all(cls, dice: Hand | Sequence[int]) -> dict[str, int]:
        """Candidate score for every catalog rule."""
        return evaluate_all(dice)

    @classmethod
    def best_rule(
        cls,
        dice: Hand | Sequence[int],
        sheet: ScoreSheet | None = None,
    ) -> tuple[Rule, int] | None:
        """
        Highest-scoring open rule for a hand.

        Ties go to the rule listed first in the catalog.

        Args:
            dice: Hand or raw sequence of five values
            sheet: Score sheet whose unscored rules are considered
                (all rules when None)

        Returns:
            (rule, score) tuple, or None if the sheet is complete
        """
        if sheet is None:
            candidates = evaluate_all(dice)
        else:
            candidates = sheet.candidates(dice)

        best: tuple[Rule, int] | None = None
        for rule in RULES:
            if rule.name not in candidates:
                continue
            score = candidates[rule.name]
            if best is None or score > best[1]:
                best = (rule, score)
        return best
