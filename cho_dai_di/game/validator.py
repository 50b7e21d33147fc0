"""Follow rules: may a candidate play follow the previous one."""

from dataclasses import dataclass

from cho_dai_di.models.card import THREE_OF_DIAMONDS, Hand
from cho_dai_di.models.game_state import FIVE_CARD_HIERARCHY, HandType

from .analyzer import HandAnalysis, HandAnalyzer
from .precedence import cmp_card, cmp_rank

# Names used in rejection messages
PLAY_NAMES = {
    HandType.SINGLE: "card",
    HandType.PAIR: "pair",
    HandType.TRIPLET: "triplet",
    HandType.STRAIGHT: "straight",
    HandType.FLUSH: "flush",
    HandType.FULL_HOUSE: "full house",
    HandType.FOUR_OF_A_KIND_PLUS_ONE: "four of a kind plus one",
    HandType.STRAIGHT_FLUSH: "straight flush",
}


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=message)

    def __bool__(self) -> bool:
        return self.is_valid


class MoveValidator:
    """Validates submitted plays against the trick on the table."""

    def __init__(self, analyzer: HandAnalyzer | None = None):
        """Initialize validator.

        Args:
            analyzer: HandAnalyzer instance (creates one if not provided)
        """
        self.analyzer = analyzer or HandAnalyzer()

    def may_follow(self, previous: Hand, candidate: Hand) -> ValidationResult:
        """Decide whether candidate may be played on top of previous.

        Args:
            previous: The trick to beat (expected to be a valid shape)
            candidate: The submitted play

        Returns:
            ValidationResult
        """
        prev = self.analyzer.analyze(previous)
        if not prev.is_valid:
            return ValidationResult.fail(
                f"the previous play is not a valid hand: {prev.error_message}"
            )

        if len(previous) != len(candidate):
            return ValidationResult.fail(
                "during a trick, all hands must contain the same number of cards"
            )

        cand = self.analyzer.analyze(candidate)
        if not cand.is_valid:
            return ValidationResult.fail(cand.error_message)

        if cand.count == 5:
            return self._compare_five_card(prev, cand)

        return self._compare_highest(prev, cand)

    def validate_opening(
        self,
        candidate: Hand,
        first_play_of_game: bool,
    ) -> ValidationResult:
        """Validate a play that opens a round (no trick to beat).

        Args:
            candidate: The submitted play
            first_play_of_game: True if nothing has been played yet this game

        Returns:
            ValidationResult
        """
        cand = self.analyzer.analyze(candidate)
        if not cand.is_valid:
            return ValidationResult.fail(cand.error_message)

        if first_play_of_game and THREE_OF_DIAMONDS not in candidate:
            return ValidationResult.fail(
                "the first play must contain the three of diamonds"
            )

        return ValidationResult.ok()

    def _compare_highest(
        self,
        prev: HandAnalysis,
        cand: HandAnalysis,
    ) -> ValidationResult:
        """Compare by highest card; ties lose."""
        assert prev.highest_card is not None and cand.highest_card is not None

        if cmp_card(cand.highest_card, prev.highest_card) > 0:
            return ValidationResult.ok()

        name = PLAY_NAMES[cand.hand_type]
        return ValidationResult.fail(
            f"the played {name} must be higher than the previous {name}"
        )

    def _compare_five_card(
        self,
        prev: HandAnalysis,
        cand: HandAnalysis,
    ) -> ValidationResult:
        """Compare two five-card hands.

        Different categories are settled by FIVE_CARD_HIERARCHY. Within a
        category, four-of-a-kind-plus-one compares the quad rank and
        everything else compares the highest card.
        """
        if cand.hand_type != prev.hand_type:
            if FIVE_CARD_HIERARCHY.index(cand.hand_type) > FIVE_CARD_HIERARCHY.index(
                prev.hand_type
            ):
                return ValidationResult.ok()
            return ValidationResult.fail(
                f"a {PLAY_NAMES[cand.hand_type]} cannot beat "
                f"a {PLAY_NAMES[prev.hand_type]}"
            )

        if cand.hand_type == HandType.FOUR_OF_A_KIND_PLUS_ONE:
            assert prev.group_rank is not None and cand.group_rank is not None
            if cmp_rank(cand.group_rank, prev.group_rank) > 0:
                return ValidationResult.ok()
            return ValidationResult.fail(
                "the played four of a kind plus one must be higher than "
                "the previous four of a kind plus one"
            )

        return self._compare_highest(prev, cand)
