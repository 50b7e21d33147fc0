"""Tests for move validator."""

import pytest

from cho_dai_di.game.validator import MoveValidator, ValidationResult
from cho_dai_di.models.card import Hand


@pytest.fixture
def validator():
    return MoveValidator()


def follows(validator: MoveValidator, previous: str, candidate: str) -> bool:
    return validator.may_follow(Hand.parse(previous), Hand.parse(candidate)).is_valid


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_ok_and_fail(self):
        """Test constructors and truthiness."""
        assert ValidationResult.ok()
        assert ValidationResult.ok().error_message == ""

        result = ValidationResult.fail("nope")
        assert not result
        assert result.error_message == "nope"


class TestSingles:
    """Tests for single card plays."""

    def test_higher_rank_follows(self, validator):
        assert follows(validator, "3D", "4D")
        assert follows(validator, "AS", "2D")

    def test_higher_suit_follows(self, validator):
        assert follows(validator, "3D", "3C")
        assert follows(validator, "3H", "3S")

    def test_lower_fails(self, validator):
        assert not follows(validator, "4D", "3S")
        assert not follows(validator, "2D", "AS")

    def test_equal_fails(self, validator):
        """Test that a card cannot follow itself."""
        result = validator.may_follow(Hand.of("7C"), Hand.of("7C"))
        assert not result.is_valid
        assert result.error_message == "the played card must be higher than the previous card"


class TestPairs:
    """Tests for pair plays."""

    def test_higher_rank_follows(self, validator):
        assert follows(validator, "3D 3H", "4C 4D")

    def test_highest_card_decides(self, validator):
        """Test that the highest card in each pair is compared."""
        # 3S beats 3H
        assert follows(validator, "3D 3H", "3C 3S")
        # 3C does not beat 3S
        assert not follows(validator, "3S 3H", "3C 3D")

    def test_mixed_ranks_rejected(self, validator):
        result = validator.may_follow(Hand.of("3D", "3H"), Hand.of("4C", "5D"))
        assert not result.is_valid
        assert "same rank" in result.error_message

    def test_size_mismatch(self, validator):
        result = validator.may_follow(Hand.of("3D"), Hand.of("4C", "4D"))
        assert not result.is_valid
        assert result.error_message == (
            "during a trick, all hands must contain the same number of cards"
        )


class TestTriplets:
    """Tests for triplet plays."""

    def test_higher_follows(self, validator):
        assert follows(validator, "5D 5C 5H", "6D 6C 6H")

    def test_lower_fails(self, validator):
        result = validator.may_follow(Hand.parse("6D 6C 6H"), Hand.parse("5D 5C 5H"))
        assert not result.is_valid
        assert result.error_message == (
            "the played triplet must be higher than the previous triplet"
        )


class TestFiveCardPlays:
    """Tests for five card plays."""

    def test_straight_highest_card(self, validator):
        assert follows(validator, "3D 4C 5H 6S 7D", "4D 5C 6H 7S 8D")
        assert not follows(validator, "4D 5C 6H 7S 8D", "3D 4C 5H 6S 7S")

    def test_same_run_higher_suit(self, validator):
        """Test straights of equal ranks decided by the top suit."""
        assert follows(validator, "3D 4C 5H 6S 7D", "3C 4D 5D 6H 7S")

    def test_wraparound_straight_is_high(self, validator):
        """Test that a straight containing the Two beats a King-high one."""
        assert follows(validator, "9D 10C JH QS KD", "AD 2C 3H 4S 5D")

    def test_flush_highest_card(self, validator):
        assert follows(validator, "3H 7H 9H JH KH", "3D 5D 7D 9D AD")
        assert not follows(validator, "3H 7H 9H JH KH", "4D 5D 7D 9D QD")

    def test_four_of_a_kind_kicker_ignored(self, validator):
        """Test that only the quad rank matters."""
        assert follows(validator, "5D 5C 5H 5S 2S", "6D 6C 6H 6S 3D")
        assert not follows(validator, "6D 6C 6H 6S 3D", "5D 5C 5H 5S 2S")

    def test_full_house_highest_card(self, validator):
        assert follows(validator, "5D 5C 5H 3S 3D", "6D 6C 6H 4S 4D")

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("3D 4C 5H 6S 7D", "3H 7H 9H JH KH"),  # straight < flush
            ("3H 7H 9H JH KH", "4D 4C 4H 3S 3D"),  # flush < full house
            ("4D 4C 4H 3S 3D", "5D 5C 5H 5S 3C"),  # full house < four plus one
            ("5D 5C 5H 5S 3C", "3S 4S 5S 6S 7S"),  # four plus one < straight flush
            ("JD QC KH AS 2D", "3H 4H 6H 7H 8H"),  # any flush beats any straight
        ],
    )
    def test_category_hierarchy(self, validator, lower, higher):
        """Test cross-category plays follow the hierarchy in one direction only."""
        assert follows(validator, lower, higher)
        assert not follows(validator, higher, lower)

    def test_not_a_combination(self, validator):
        result = validator.may_follow(
            Hand.parse("3D 4C 5H 6S 7D"), Hand.parse("3C 5C 7H 9S JD")
        )
        assert not result.is_valid
        assert result.error_message.startswith("5 card plays must be")

    def test_invalid_previous(self, validator):
        """Test that a malformed previous play is reported, not raised."""
        result = validator.may_follow(Hand.of("3D", "4D"), Hand.of("5C", "5D"))
        assert not result.is_valid
        assert "previous play" in result.error_message


class TestOpening:
    """Tests for plays with no trick to beat."""

    def test_first_play_needs_three_of_diamonds(self, validator):
        result = validator.validate_opening(Hand.of("4D"), first_play_of_game=True)
        assert not result.is_valid
        assert result.error_message == "the first play must contain the three of diamonds"

        assert validator.validate_opening(Hand.of("3D"), first_play_of_game=True)
        assert validator.validate_opening(Hand.of("3D", "3S"), first_play_of_game=True)

    def test_new_round_any_valid_shape(self, validator):
        assert validator.validate_opening(Hand.of("4D"), first_play_of_game=False)
        assert not validator.validate_opening(
            Hand.of("4D", "5D"), first_play_of_game=False
        )
