"""Cho Dai Di precedence tables and card ordering."""

from enum import Enum
from typing import Iterable

from cho_dai_di.models.card import Card, Hand, Rank, Suit

# Lowest to highest
SUIT_PRECEDENCE: tuple[Suit, ...] = (
    Suit.DIAMONDS,
    Suit.CLUBS,
    Suit.HEARTS,
    Suit.SPADES,
)

# Lowest to highest: Three is the weakest rank and Two the strongest
RANK_PRECEDENCE: tuple[Rank, ...] = (
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
    Rank.TWO,
)

_SUIT_INDEX = {suit: i for i, suit in enumerate(SUIT_PRECEDENCE)}
_RANK_INDEX = {rank: i for i, rank in enumerate(RANK_PRECEDENCE)}


class SortCardsBy(str, Enum):
    """Display ordering for a hand."""

    RANK = "rank"
    SUIT = "suit"

    def toggled(self) -> "SortCardsBy":
        return SortCardsBy.SUIT if self is SortCardsBy.RANK else SortCardsBy.RANK


def suit_index(suit: Suit) -> int:
    """Position of a suit in the precedence table (0 = Diamonds)."""
    return _SUIT_INDEX[suit]


def rank_index(rank: Rank) -> int:
    """Position of a rank in the precedence table (0 = Three, 12 = Two)."""
    return _RANK_INDEX[rank]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def cmp_suit(a: Suit, b: Suit) -> int:
    """Compare two suits: -1 if a is lower, 0 if equal, 1 if higher."""
    return _sign(_SUIT_INDEX[a] - _SUIT_INDEX[b])


def cmp_rank(a: Rank, b: Rank) -> int:
    """Compare two ranks: -1 if a is lower, 0 if equal, 1 if higher."""
    return _sign(_RANK_INDEX[a] - _RANK_INDEX[b])


def cmp_card(a: Card, b: Card) -> int:
    """Compare two cards by rank, breaking ties by suit.

    The Three of Diamonds is the lowest card and the Two of Spades the highest.
    """
    if a.rank == b.rank:
        return cmp_suit(a.suit, b.suit)
    return cmp_rank(a.rank, b.rank)


def card_key(card: Card) -> tuple[int, int]:
    """Sort key for rank-major ordering (same order as cmp_card)."""
    return (_RANK_INDEX[card.rank], _SUIT_INDEX[card.suit])


def suit_major_key(card: Card) -> tuple[int, int]:
    """Sort key for suit-major ordering."""
    return (_SUIT_INDEX[card.suit], _RANK_INDEX[card.rank])


def highest_card(cards: Iterable[Card]) -> Card | None:
    """Get the highest card, or None if there are no cards."""
    return max(cards, key=card_key, default=None)


def lowest_card(cards: Iterable[Card]) -> Card | None:
    """Get the lowest card, or None if there are no cards."""
    return min(cards, key=card_key, default=None)


def sort_by_rank(hand: Hand) -> None:
    """Sort a hand in place by rank, then suit."""
    hand.sort(key=card_key)


def sort_by_suit(hand: Hand) -> None:
    """Sort a hand in place by suit, then rank."""
    hand.sort(key=suit_major_key)


# Rank-major is exactly card precedence
sort_by_precedence = sort_by_rank


def sort_hand(hand: Hand, by: SortCardsBy) -> None:
    """Sort a hand in place using the given display ordering."""
    if by is SortCardsBy.SUIT:
        sort_by_suit(hand)
    else:
        sort_by_rank(hand)
