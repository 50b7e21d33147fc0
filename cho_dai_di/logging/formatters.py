"""Formatters for game log output."""

from typing import Iterable

from cho_dai_di.models.card import Card, Hand


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Rank then suit letter (e.g., "3D" for the Three of Diamonds).
    """
    return card.code


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format, in order.

    Returns:
        Comma-separated card strings (e.g., "9S,9H,9D").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(hands: list[Hand]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        hands: List of Hands indexed by seat.

    Returns:
        Dict mapping seat (as string) to formatted hand string.
    """
    return {str(i): format_cards(h) for i, h in enumerate(hands)}
