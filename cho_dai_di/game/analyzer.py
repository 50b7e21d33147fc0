"""Shape analysis for submitted plays."""

from dataclasses import dataclass
from enum import IntEnum

from cho_dai_di.models.card import Card, Hand, Rank
from cho_dai_di.models.game_state import HandType

from .precedence import RANK_PRECEDENCE, highest_card, rank_index

VALID_PLAY_SIZES = (1, 2, 3, 5)


class AnalysisError(IntEnum):
    """Error codes from hand analysis."""

    NONE = 0
    EMPTY = 1
    INVALID_SIZE = 2
    MIXED_RANKS = 3
    NOT_A_COMBINATION = 4


ERROR_MESSAGES = {
    AnalysisError.NONE: "",
    AnalysisError.EMPTY: "a hand must contain at least one card",
    AnalysisError.INVALID_SIZE: (
        "plays must be either a single card, a pair, a triplet, or a quintuple"
    ),
    AnalysisError.MIXED_RANKS: "1-3 card plays may only contain cards of the same rank",
    AnalysisError.NOT_A_COMBINATION: (
        "5 card plays must be a straight, a flush, a full house, "
        "a four of a kind plus one, or a straight flush"
    ),
}


def _run(start: int) -> tuple[Rank, ...]:
    return RANK_PRECEDENCE[start:start + 5]


def _pattern(*ranks: Rank) -> tuple[Rank, ...]:
    return tuple(sorted(ranks, key=rank_index))


# Three-Seven up to Ten-Ace, plus the three wraparound straights. Matching is
# on the precedence-sorted ranks because Two sits above Ace.
STRAIGHT_PATTERNS: frozenset[tuple[Rank, ...]] = frozenset(
    [_run(i) for i in range(8)]
    + [
        _pattern(Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE),
        _pattern(Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX),
        _pattern(Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE, Rank.TWO),
    ]
)


def same_rank(hand: Hand) -> bool:
    """Check that the hand is non-empty and all cards share one rank."""
    first = hand.first()
    if first is None:
        return False
    return all(c.rank == first.rank for c in hand)


def is_pair(hand: Hand) -> bool:
    return len(hand) == 2 and same_rank(hand)


def is_triplet(hand: Hand) -> bool:
    return len(hand) == 3 and same_rank(hand)


def _group_sizes(hand: Hand) -> list[int]:
    return sorted(hand.rank_counts().values())


def is_four_of_a_kind_plus_one(hand: Hand) -> bool:
    """Four cards of one rank and one card of another."""
    return len(hand) == 5 and _group_sizes(hand) == [1, 4]


def is_full_house(hand: Hand) -> bool:
    """Three cards of one rank and two of another."""
    return len(hand) == 5 and _group_sizes(hand) == [2, 3]


def is_flush(hand: Hand) -> bool:
    """Five cards of the same suit."""
    if len(hand) != 5:
        return False
    suit = hand[0].suit
    return all(c.suit == suit for c in hand)


def is_straight(hand: Hand) -> bool:
    """Five cards whose ranks match one of the eleven straight patterns."""
    if len(hand) != 5:
        return False
    ranks = tuple(sorted((c.rank for c in hand), key=rank_index))
    return ranks in STRAIGHT_PATTERNS


def is_straight_flush(hand: Hand) -> bool:
    return is_straight(hand) and is_flush(hand)


def largest_group_rank(hand: Hand) -> Rank | None:
    """Rank with the most cards in the hand.

    Ties go to the lowest rank in precedence order. Four-of-a-kind-plus-one
    hands are ranked by this, so the kicker never matters.
    """
    if hand.is_empty():
        return None
    counts = hand.rank_counts()
    best = max(counts.values())
    for rank in RANK_PRECEDENCE:
        if counts.get(rank, 0) == best:
            return rank
    return None


def five_card_category(hand: Hand) -> HandType:
    """Dominant category of a five-card hand, or INVALID.

    Straight flush is checked first since it is also a straight and a flush.
    """
    if is_straight_flush(hand):
        return HandType.STRAIGHT_FLUSH
    if is_four_of_a_kind_plus_one(hand):
        return HandType.FOUR_OF_A_KIND_PLUS_ONE
    if is_full_house(hand):
        return HandType.FULL_HOUSE
    if is_flush(hand):
        return HandType.FLUSH
    if is_straight(hand):
        return HandType.STRAIGHT
    return HandType.INVALID


@dataclass
class HandAnalysis:
    """Result of analyzing a hand."""

    hand_type: HandType
    count: int
    highest_card: Card | None = None
    group_rank: Rank | None = None  # Rank of the largest group (5-card hands)
    error: AnalysisError = AnalysisError.NONE

    @property
    def is_valid(self) -> bool:
        """Check if analysis found no errors."""
        return self.error == AnalysisError.NONE

    @property
    def error_message(self) -> str:
        return ERROR_MESSAGES[self.error]


class HandAnalyzer:
    """Classifies hands into Cho Dai Di play shapes."""

    def check_shape(self, hand: Hand) -> AnalysisError:
        """Check whether a hand is a legal play shape.

        Args:
            hand: Cards to check

        Returns:
            AnalysisError.NONE if valid, otherwise the reason it is not
        """
        if hand.is_empty():
            return AnalysisError.EMPTY

        if len(hand) not in VALID_PLAY_SIZES:
            return AnalysisError.INVALID_SIZE

        if len(hand) <= 3:
            return AnalysisError.NONE if same_rank(hand) else AnalysisError.MIXED_RANKS

        if five_card_category(hand) == HandType.INVALID:
            return AnalysisError.NOT_A_COMBINATION

        return AnalysisError.NONE

    def is_valid_shape(self, hand: Hand) -> bool:
        return self.check_shape(hand) == AnalysisError.NONE

    def analyze(self, hand: Hand) -> HandAnalysis:
        """Analyze a hand.

        Args:
            hand: Cards to analyze

        Returns:
            HandAnalysis result
        """
        error = self.check_shape(hand)
        if error != AnalysisError.NONE:
            return HandAnalysis(
                hand_type=HandType.INVALID,
                count=len(hand),
                highest_card=highest_card(hand),
                error=error,
            )

        count = len(hand)
        if count == 1:
            hand_type = HandType.SINGLE
        elif count == 2:
            hand_type = HandType.PAIR
        elif count == 3:
            hand_type = HandType.TRIPLET
        else:
            hand_type = five_card_category(hand)

        return HandAnalysis(
            hand_type=hand_type,
            count=count,
            highest_card=highest_card(hand),
            group_rank=largest_group_rank(hand) if count == 5 else None,
        )
