"""
Yahtzee Engine - Exceptions

All engine errors subclass ValueError so callers that already guard
against bad input with ``except ValueError`` keep working.
"""


class InvalidHand(ValueError):
    """Raised when dice values do not form a valid five-dice hand."""


class UnknownRule(ValueError):
    """Raised when a rule name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown rule '{name}'.")
        self.name = name


class RuleAlreadyScored(ValueError):
    """Raised when committing a score to a rule that already has one."""

    def __init__(self, name: str, score: int) -> None:
        super().__init__(f"Rule '{name}' has already been scored ({score} points).")
        self.name = name
        self.score = score
