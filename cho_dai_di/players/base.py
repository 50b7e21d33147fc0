"""Base player class.

Defines the interface that every seat at the table, human or automated,
must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from cho_dai_di.models.card import Hand

if TYPE_CHECKING:
    from cho_dai_di.game.session import GameSession


@dataclass
class PlayCards:
    """Turn action: play these cards."""

    cards: Hand


@dataclass
class Pass:
    """Turn action: pass."""


TurnAction = Union[PlayCards, Pass]


class Player(ABC):
    """Abstract base class for players.

    Implementations only ever return cards taken from the hand they are
    given; the orchestrator rejects anything else.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name."""

    @abstractmethod
    def take_turn(self, session: GameSession, hand: Hand) -> TurnAction:
        """Decide what to do on this turn.

        Args:
            session: Current game session (read only)
            hand: Copy of this player's hand

        Returns:
            PlayCards with the chosen cards, or Pass
        """

    def __str__(self) -> str:
        return self.name
