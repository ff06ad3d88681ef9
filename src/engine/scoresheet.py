"""
Yahtzee Engine - Score Sheet

Immutable record of which rules have been committed during a game. The rule
engine itself stays stateless; the game loop owns a ScoreSheet and replaces
it with the copy returned by ``record``.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from src.engine.base import Hand
from src.engine.catalog import RULE_NAMES, RULES, get_rule
from src.engine.errors import RuleAlreadyScored
from src.engine.rules import evaluate

logger = logging.getLogger(__name__)


class ScoreSheet(BaseModel):
    """
    Committed score per catalog rule, or None while the rule is unscored.

    Scores are stored as a tuple in catalog order. Build a sheet from
    existing scores with ``ScoreSheet(scores={...})``; rules left out
    start unscored.
    """

    entries: tuple[int | None, ...] = Field(
        default_factory=lambda: (None,) * len(RULE_NAMES)
    )

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="before")
    @classmethod
    def _from_scores(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "scores" not in data:
            return data
        scores = data["scores"]
        unknown = set(scores) - set(RULE_NAMES)
        if unknown:
            raise ValueError(f"Unknown rules on score sheet: {sorted(unknown)}.")
        return {"entries": tuple(scores.get(name) for name in RULE_NAMES)}

    @field_validator("entries")
    @classmethod
    def _within_rule_bounds(cls, entries: tuple[int | None, ...]) -> tuple[int | None, ...]:
        if len(entries) != len(RULES):
            raise ValueError(f"Score sheet needs {len(RULES)} entries, got {len(entries)}.")
        for rule, score in zip(RULES, entries):
            if score is None:
                continue
            if score < 0:
                raise ValueError(f"Score for '{rule.name}' cannot be negative, got {score}.")
            if score > rule.max_score:
                raise ValueError(
                    f"Score for '{rule.name}' cannot exceed {rule.max_score}, got {score}."
                )
        return entries

    @classmethod
    def new(cls) -> "ScoreSheet":
        """A sheet with every catalog rule unscored."""
        return cls()

    @property
    def scores(self) -> Mapping[str, int | None]:
        """Read-only view of rule name -> score, in catalog order."""
        return MappingProxyType(dict(zip(RULE_NAMES, self.entries)))

    @property
    def unscored_rules(self) -> tuple[str, ...]:
        """Names of rules still open, in catalog order."""
        return tuple(name for name, score in zip(RULE_NAMES, self.entries) if score is None)

    @property
    def is_complete(self) -> bool:
        """True once every rule holds a score."""
        return not self.unscored_rules

    @property
    def total(self) -> int:
        """Sum of all committed scores."""
        return sum(score for score in self.entries if score is not None)

    def is_scored(self, rule_name: str) -> bool:
        """Whether a rule already holds a score; raises UnknownRule."""
        get_rule(rule_name)
        return self.scores[rule_name] is not None

    def candidates(self, hand: Hand | Sequence[int]) -> dict[str, int]:
        """Candidate scores for the rules that are still unscored."""
        if not isinstance(hand, Hand):
            hand = Hand.from_sequence(hand)
        return {name: evaluate(get_rule(name), hand) for name in self.unscored_rules}

    def record(self, rule_name: str, hand: Hand | Sequence[int]) -> "ScoreSheet":
        """
        Commit the hand's score for a rule.

        Args:
            rule_name: Catalog rule to fill in
            hand: Final hand of the turn

        Returns:
            New ScoreSheet with the score set; this sheet is unchanged

        Raises:
            UnknownRule: If the rule is not in the catalog
            RuleAlreadyScored: If the rule already holds a score
            InvalidHand: If the hand is malformed
        """
        rule = get_rule(rule_name)
        existing = self.scores[rule.name]
        if existing is not None:
            raise RuleAlreadyScored(rule.name, existing)

        score = evaluate(rule, hand)
        logger.info("Recorded %d points for %s", score, rule.name)
        return ScoreSheet(scores={**self.scores, rule.name: score})
