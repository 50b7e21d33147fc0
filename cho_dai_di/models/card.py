"""Card and Hand models, text parsing and the standard deck."""

import random
from collections import Counter
from enum import Enum
from typing import Any, Callable, Iterable, Iterator

from pydantic import BaseModel


class CardParseError(ValueError):
    """Raised when a rank, suit or card token cannot be parsed."""


class Suit(Enum):
    """Card suit.

    Suits carry no ordering of their own; precedence is defined by the game
    (see cho_dai_di.game.precedence).
    """

    DIAMONDS = "D"
    CLUBS = "C"
    HEARTS = "H"
    SPADES = "S"


class Rank(Enum):
    """Card rank.

    Like suits, ranks are unordered here. Cho Dai Di ranks Three lowest and
    Two highest, which is not their face value.
    """

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


# Map rank to display string
RANK_NAMES = {rank: rank.value for rank in Rank}

SUIT_SYMBOLS = {
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

# Accepted rank tokens (lowercase)
RANK_ALIASES: dict[str, Rank] = {
    "2": Rank.TWO, "two": Rank.TWO, "deuce": Rank.TWO,
    "3": Rank.THREE, "three": Rank.THREE,
    "4": Rank.FOUR, "four": Rank.FOUR,
    "5": Rank.FIVE, "five": Rank.FIVE,
    "6": Rank.SIX, "six": Rank.SIX,
    "7": Rank.SEVEN, "seven": Rank.SEVEN,
    "8": Rank.EIGHT, "eight": Rank.EIGHT,
    "9": Rank.NINE, "nine": Rank.NINE,
    "10": Rank.TEN, "ten": Rank.TEN,
    "11": Rank.JACK, "j": Rank.JACK, "jack": Rank.JACK,
    "12": Rank.QUEEN, "q": Rank.QUEEN, "queen": Rank.QUEEN,
    "13": Rank.KING, "k": Rank.KING, "king": Rank.KING,
    "1": Rank.ACE, "a": Rank.ACE, "ace": Rank.ACE,
}

# Accepted suit tokens (lowercase letters/words plus filled and outlined glyphs)
SUIT_ALIASES: dict[str, Suit] = {
    "d": Suit.DIAMONDS, "diamonds": Suit.DIAMONDS, "♦": Suit.DIAMONDS, "♢": Suit.DIAMONDS,
    "c": Suit.CLUBS, "clubs": Suit.CLUBS, "♣": Suit.CLUBS, "♧": Suit.CLUBS,
    "h": Suit.HEARTS, "hearts": Suit.HEARTS, "♥": Suit.HEARTS, "♡": Suit.HEARTS,
    "s": Suit.SPADES, "spades": Suit.SPADES, "♠": Suit.SPADES, "♤": Suit.SPADES,
}


def parse_rank(token: str) -> Rank:
    """Parse a rank token such as "10", "J" or "queen" (case-insensitive)."""
    rank = RANK_ALIASES.get(token.strip().lower())
    if rank is None:
        raise CardParseError(f"`{token}` is not a rank")
    return rank


def parse_suit(token: str) -> Suit:
    """Parse a suit token such as "S", "hearts" or "♦" (case-insensitive)."""
    suit = SUIT_ALIASES.get(token.strip().lower())
    if suit is None:
        raise CardParseError(f"`{token}` is not a suit")
    return suit


class Card(BaseModel, frozen=True):
    """Single card representation."""

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, text: str) -> "Card":
        """Parse a card token: a rank immediately followed by a suit.

        Args:
            text: Token such as "3D", "10h", "AS" or "2♠".

        Returns:
            Parsed Card.

        Raises:
            CardParseError: If no rank/suit split of the token is valid.
        """
        token = text.strip()
        if len(token) < 2:
            raise CardParseError(f"`{token}` is not a valid card")

        # Try each split point; the rank prefix is at most a few characters
        for i in range(1, len(token)):
            rank = RANK_ALIASES.get(token[:i].lower())
            suit = SUIT_ALIASES.get(token[i:].lower())
            if rank is not None and suit is not None:
                return cls(rank=rank, suit=suit)

        raise CardParseError(f"`{token}` is not a valid card")

    @property
    def code(self) -> str:
        """ASCII form used in logs, e.g. "10H"."""
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


THREE_OF_DIAMONDS = Card(rank=Rank.THREE, suit=Suit.DIAMONDS)
TWO_OF_SPADES = Card(rank=Rank.TWO, suit=Suit.SPADES)

# The 52 canonical cards, suit by suit
STANDARD_DECK: tuple[Card, ...] = tuple(
    Card(rank=rank, suit=suit) for suit in Suit for rank in Rank
)


class Hand:
    """Ordered collection of cards.

    Used for a player's hand, a submitted play, the undealt deck and the
    previous trick. Order matters for display and for ``==``; rule checks use
    ``same_cards`` which ignores order. The size is not bounded here: whether
    a hand is a legal play is decided by the analyzer.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards, in order.
        """
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """Parse whitespace-separated card tokens.

        Each token may carry a trailing comma, so "3D, 3H" and "3d 3h" are
        equivalent.

        Raises:
            CardParseError: On the first token that is not a card.
        """
        return cls(Card.parse(token.rstrip(",")) for token in text.split())

    @classmethod
    def of(cls, *tokens: str) -> "Hand":
        """Build a hand from individual card tokens, e.g. Hand.of("3D", "3H")."""
        return cls(Card.parse(token) for token in tokens)

    def add(self, card: Card) -> None:
        """Append a card."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Append several cards."""
        self._cards.extend(cards)

    def pop(self) -> Card:
        """Remove and return the last card."""
        return self._cards.pop()

    def remove(self, card: Card) -> None:
        """Remove a card if present."""
        if card in self._cards:
            self._cards.remove(card)

    def retain(self, predicate: Callable[[Card], bool]) -> None:
        """Keep only the cards for which predicate returns True."""
        self._cards = [c for c in self._cards if predicate(c)]

    def contains(self, card: Card) -> bool:
        """Check if card is in the hand."""
        return card in self._cards

    def contains_all(self, cards: Iterable[Card]) -> bool:
        """Check if every given card is in the hand, counting repeats."""
        have = Counter(self._cards)
        return all(have[c] >= n for c, n in Counter(cards).items())

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return len(self._cards) == 0

    def first(self) -> Card | None:
        """Get the first card, if any."""
        return self._cards[0] if self._cards else None

    def cards_by_rank(self, rank: Rank) -> list[Card]:
        """Get all cards with the specified rank."""
        return [c for c in self._cards if c.rank == rank]

    def cards_by_suit(self, suit: Suit) -> list[Card]:
        """Get all cards with the specified suit."""
        return [c for c in self._cards if c.suit == suit]

    def rank_counts(self) -> Counter:
        """Count cards per rank."""
        return Counter(c.rank for c in self._cards)

    def sort(self, key: Callable[[Card], Any]) -> None:
        """Sort in place by the given key."""
        self._cards.sort(key=key)

    def same_cards(self, other: "Hand") -> bool:
        """Check if both hands hold the same cards, ignoring order."""
        return Counter(self._cards) == Counter(other._cards)

    def to_list(self) -> list[Card]:
        """Get cards as a list, in hand order."""
        return list(self._cards)

    def copy(self) -> "Hand":
        """Create a copy of this hand."""
        return Hand(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{', '.join(c.code for c in self._cards)}])"


def create_full_deck() -> Hand:
    """Create a full 52-card deck in canonical order."""
    return Hand(STANDARD_DECK)


def shuffled_deck(rng: random.Random | None = None) -> Hand:
    """Create a full deck shuffled with the given RNG.

    Args:
        rng: Random source. Uses the module-level RNG if not provided.

    Returns:
        Shuffled Hand of 52 cards.
    """
    cards = list(STANDARD_DECK)
    (rng or random).shuffle(cards)
    return Hand(cards)
