"""
Yahtzee Engine - Base Classes

This module defines the foundational data structures and enums used throughout
the rule engine. All classes are immutable (frozen dataclasses) to ensure
thread-safety and predictable behavior.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from src.engine.validators import NUM_DICE, validate_hand


class RuleKind(Enum):
    """Evaluation strategy a rule is configured with."""
    SINGLE_VALUE_TOTAL = "single_value_total"
    DISTRIBUTION_SUM = "distribution_sum"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YAHTZEE = "yahtzee"


@dataclass(frozen=True)
class Hand:
    """
    Immutable snapshot of the five dice being scored.

    Attributes:
        values: Tuple of exactly five face values, each 1-6
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate the hand; raises InvalidHand."""
        # Normalizes lists passed directly to the constructor.
        object.__setattr__(self, "values", validate_hand(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Hand":
        """Create a Hand from any sequence type."""
        return cls(values=tuple(values))

    def __str__(self) -> str:
        return " ".join(str(v) for v in self.values)


@dataclass(frozen=True)
class Rule:
    """
    A named scoring rule: fixed configuration plus a strategy tag.

    Only the fields relevant to ``kind`` are meaningful; the others keep
    their defaults.

    Attributes:
        name: Unique identifier (e.g. "full_house")
        kind: Strategy used to evaluate the rule
        description: Human-readable text for the score sheet
        face: Target face value (Single-Value Total)
        min_count: Required same-value count, 0 for none (Distribution Sum)
        award: Fixed points awarded when the pattern matches
    """
    name: str
    kind: RuleKind
    description: str
    face: int = 0
    min_count: int = 0
    award: int = 0

    def __post_init__(self) -> None:
        """Validate configuration against the strategy."""
        if self.kind == RuleKind.SINGLE_VALUE_TOTAL:
            if not (1 <= self.face <= 6):
                raise ValueError(f"Rule '{self.name}' needs a face between 1 and 6, got {self.face}.")
        elif self.kind == RuleKind.DISTRIBUTION_SUM:
            if not (0 <= self.min_count <= NUM_DICE):
                raise ValueError(
                    f"Rule '{self.name}' needs a min_count between 0 and {NUM_DICE}, "
                    f"got {self.min_count}."
                )
        elif self.award <= 0:
            raise ValueError(f"Rule '{self.name}' needs a positive award, got {self.award}.")

    @property
    def max_score(self) -> int:
        """Largest score this rule can produce for any hand."""
        if self.kind == RuleKind.SINGLE_VALUE_TOTAL:
            return self.face * NUM_DICE
        if self.kind == RuleKind.DISTRIBUTION_SUM:
            return 6 * NUM_DICE
        return self.award
