"""
Yahtzee Engine - Rule Catalog

The thirteen scoring rules, built once at import time, in score-sheet order.
"""

from src.engine.base import Rule, RuleKind
from src.engine.errors import UnknownRule

FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YAHTZEE_POINTS = 50

_FACE_NAMES = ("ones", "twos", "threes", "fours", "fives", "sixes")

UPPER_SECTION: tuple[Rule, ...] = tuple(
    Rule(
        name=name,
        kind=RuleKind.SINGLE_VALUE_TOTAL,
        description=f"Sum of {face}'s",
        face=face,
    )
    for face, name in enumerate(_FACE_NAMES, start=1)
)

LOWER_SECTION: tuple[Rule, ...] = (
    Rule(
        name="three_of_kind",
        kind=RuleKind.DISTRIBUTION_SUM,
        description="Sum of three of a kind",
        min_count=3,
    ),
    Rule(
        name="four_of_kind",
        kind=RuleKind.DISTRIBUTION_SUM,
        description="Sum of four of a kind",
        min_count=4,
    ),
    Rule(
        name="full_house",
        kind=RuleKind.FULL_HOUSE,
        description=f"Full House ({FULL_HOUSE_POINTS} points)",
        award=FULL_HOUSE_POINTS,
    ),
    Rule(
        name="small_straight",
        kind=RuleKind.SMALL_STRAIGHT,
        description=f"Small Straight ({SMALL_STRAIGHT_POINTS} points)",
        award=SMALL_STRAIGHT_POINTS,
    ),
    Rule(
        name="large_straight",
        kind=RuleKind.LARGE_STRAIGHT,
        description=f"Large Straight ({LARGE_STRAIGHT_POINTS} points)",
        award=LARGE_STRAIGHT_POINTS,
    ),
    Rule(
        name="yahtzee",
        kind=RuleKind.YAHTZEE,
        description=f"Yahtzee ({YAHTZEE_POINTS} points)",
        award=YAHTZEE_POINTS,
    ),
    Rule(
        name="chance",
        kind=RuleKind.DISTRIBUTION_SUM,
        description="Sum of all dice",
        min_count=0,
    ),
)

RULES: tuple[Rule, ...] = UPPER_SECTION + LOWER_SECTION
RULE_NAMES: tuple[str, ...] = tuple(rule.name for rule in RULES)

_BY_NAME: dict[str, Rule] = {rule.name: rule for rule in RULES}


def get_rule(name: str) -> Rule:
    """
    Look up a catalog rule by name.

    Raises:
        UnknownRule: If no rule has that name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownRule(name) from None
