"""
Yahtzee Engine - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import dataclasses

import pytest
from src.engine.base import Hand, Rule, RuleKind
from src.engine.errors import InvalidHand
from src.engine.validators import validate_hand, validate_held_indices


class TestRuleKind:
    """Tests for RuleKind enum."""

    def test_six_strategies(self):
        assert len(RuleKind) == 6

    def test_values(self):
        assert RuleKind.SINGLE_VALUE_TOTAL.value == "single_value_total"
        assert RuleKind.YAHTZEE.value == "yahtzee"


class TestHand:
    """Tests for Hand dataclass."""

    def test_create_valid_hand(self):
        hand = Hand(values=(1, 2, 3, 4, 5))
        assert len(hand) == 5
        assert hand.values == (1, 2, 3, 4, 5)

    def test_list_is_normalized_to_tuple(self):
        hand = Hand(values=[6, 6, 1, 2, 3])
        assert hand.values == (6, 6, 1, 2, 3)

    def test_from_sequence_list(self):
        hand = Hand.from_sequence([2, 2, 3, 2, 5])
        assert hand.values == (2, 2, 3, 2, 5)

    def test_indexing(self):
        hand = Hand(values=(1, 2, 3, 4, 5))
        assert hand[0] == 1
        assert hand[4] == 5

    def test_iteration(self):
        assert list(Hand(values=(3, 1, 4, 1, 5))) == [3, 1, 4, 1, 5]

    def test_str(self):
        assert str(Hand(values=(3, 1, 4, 1, 5))) == "3 1 4 1 5"

    def test_is_frozen(self):
        hand = Hand(values=(1, 2, 3, 4, 5))
        with pytest.raises(dataclasses.FrozenInstanceError):
            hand.values = (6, 6, 6, 6, 6)

    def test_equal_hands(self):
        assert Hand(values=(1, 1, 2, 2, 3)) == Hand.from_sequence([1, 1, 2, 2, 3])

    def test_too_few_dice_raises(self):
        with pytest.raises(InvalidHand, match="Exactly 5 dice required, got 4"):
            Hand(values=(1, 2, 3, 4))

    def test_out_of_range_raises(self):
        with pytest.raises(InvalidHand, match="index 2 is 7"):
            Hand(values=(1, 2, 7, 4, 5))

    def test_invalid_hand_is_value_error(self):
        with pytest.raises(ValueError):
            Hand(values=(0, 1, 2, 3, 4))

    def test_all_invalid_hands_rejected(self, invalid_hands):
        for values in invalid_hands:
            with pytest.raises(InvalidHand):
                Hand.from_sequence(values)


class TestRule:
    """Tests for Rule dataclass."""

    def test_single_value_rule(self):
        rule = Rule(name="fours", kind=RuleKind.SINGLE_VALUE_TOTAL, description="Sum of 4's", face=4)
        assert rule.face == 4
        assert rule.max_score == 20

    def test_distribution_rule_max_score(self):
        rule = Rule(name="chance", kind=RuleKind.DISTRIBUTION_SUM, description="", min_count=0)
        assert rule.max_score == 30

    def test_award_rule_max_score(self):
        rule = Rule(name="yahtzee", kind=RuleKind.YAHTZEE, description="", award=50)
        assert rule.max_score == 50

    def test_is_frozen(self):
        rule = Rule(name="yahtzee", kind=RuleKind.YAHTZEE, description="", award=50)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.award = 100

    @pytest.mark.parametrize("face", [0, 7])
    def test_invalid_face_raises(self, face):
        with pytest.raises(ValueError, match="needs a face between 1 and 6"):
            Rule(name="bad", kind=RuleKind.SINGLE_VALUE_TOTAL, description="", face=face)

    def test_invalid_min_count_raises(self):
        with pytest.raises(ValueError, match="needs a min_count"):
            Rule(name="bad", kind=RuleKind.DISTRIBUTION_SUM, description="", min_count=6)

    def test_missing_award_raises(self):
        with pytest.raises(ValueError, match="needs a positive award"):
            Rule(name="bad", kind=RuleKind.FULL_HOUSE, description="")


class TestValidateHand:
    """Tests for validate_hand."""

    def test_valid_hand(self):
        assert validate_hand([1, 2, 3, 4, 5]) == (1, 2, 3, 4, 5)

    def test_none_raises(self):
        with pytest.raises(InvalidHand, match="got none"):
            validate_hand(None)

    def test_empty_raises(self):
        with pytest.raises(InvalidHand, match="got 0"):
            validate_hand([])

    def test_too_many_raises(self):
        with pytest.raises(InvalidHand, match="got 6"):
            validate_hand([1, 2, 3, 4, 5, 6])

    def test_non_integer_raises(self):
        with pytest.raises(InvalidHand, match="must be an integer"):
            validate_hand([1, 2, 3, 4, 5.0])

    def test_bool_raises(self):
        with pytest.raises(InvalidHand, match="must be an integer"):
            validate_hand([1, 2, 3, 4, True])


class TestValidateHeldIndices:
    """Tests for validate_held_indices."""

    def test_empty(self):
        assert validate_held_indices([]) == frozenset()

    def test_valid(self):
        assert validate_held_indices([0, 4, 4]) == frozenset({0, 4})

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Held index 5 is out of range"):
            validate_held_indices({5})

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            validate_held_indices({-1})

    @pytest.mark.parametrize("idx", [True, False])
    def test_bool_raises(self, idx):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_held_indices({idx})
