"""
Yahtzee Engine.

Pure Python rule engine with zero UI/database dependencies.
Scores a five-dice hand against the thirteen Yahtzee rules.
"""

from src.engine.base import Hand, Rule, RuleKind
from src.engine.catalog import RULE_NAMES, RULES, get_rule
from src.engine.errors import InvalidHand, RuleAlreadyScored, UnknownRule
from src.engine.rules import evaluate, evaluate_all
from src.engine.scoresheet import ScoreSheet
from src.engine.stats import count_of, dice_sum, distinct_faces, frequencies
from src.engine.yahtzee import YahtzeeEngine

__all__ = [
    # Data Classes
    "Hand",
    "Rule",
    "ScoreSheet",
    # Enums
    "RuleKind",
    # Catalog
    "RULES",
    "RULE_NAMES",
    "get_rule",
    # Evaluation
    "evaluate",
    "evaluate_all",
    "dice_sum",
    "count_of",
    "frequencies",
    "distinct_faces",
    # Errors
    "InvalidHand",
    "RuleAlreadyScored",
    "UnknownRule",
    # Engines
    "YahtzeeEngine",
]
