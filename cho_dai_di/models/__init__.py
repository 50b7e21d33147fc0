"""Game models."""

from .card import (
    STANDARD_DECK,
    THREE_OF_DIAMONDS,
    TWO_OF_SPADES,
    Card,
    CardParseError,
    Hand,
    Rank,
    Suit,
)
from .game_state import FIVE_CARD_HIERARCHY, GameState, HandType, RoundState

__all__ = [
    "Card",
    "CardParseError",
    "Hand",
    "Rank",
    "Suit",
    "STANDARD_DECK",
    "THREE_OF_DIAMONDS",
    "TWO_OF_SPADES",
    "GameState",
    "HandType",
    "RoundState",
    "FIVE_CARD_HIERARCHY",
]
