"""Automated player.

Strategy:
- Ask the session for every legal play from the current hand
- Pick one uniformly at random
- Pass when there is nothing to play
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from cho_dai_di.game.precedence import sort_by_rank
from cho_dai_di.models.card import Hand

from .base import Pass, PlayCards, Player, TurnAction

if TYPE_CHECKING:
    from cho_dai_di.game.session import GameSession

logger = logging.getLogger(__name__)

AI_NAMES = ("AIshley", "FelAIcity", "AImy", "ChoBot", "Hirayama")


class RandomPlayer(Player):
    """Plays a uniformly random legal play."""

    def __init__(self, name: str, rng: random.Random | None = None):
        """Initialize player.

        Args:
            name: Display name
            rng: Random source for move selection
        """
        self._name = name
        self.rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    def take_turn(self, session: GameSession, hand: Hand) -> TurnAction:
        sort_by_rank(hand)

        possible_plays = session.possible_plays(hand)
        if not possible_plays:
            logger.debug(f"no possible plays found for {self.name}")
            return Pass()

        logger.debug(f"{len(possible_plays)} possible play(s) found for {self.name}")
        return PlayCards(self.rng.choice(possible_plays))


def new_ai_players(count: int, rng: random.Random | None = None) -> list[RandomPlayer]:
    """Create automated players with distinct names from AI_NAMES.

    Args:
        count: Number of players (at most len(AI_NAMES))
        rng: Random source for names and for each player's choices

    Returns:
        List of RandomPlayer
    """
    if count > len(AI_NAMES):
        raise ValueError(f"ran out of AI names: {count} requested, {len(AI_NAMES)} available")

    rng = rng or random.Random()
    names = rng.sample(AI_NAMES, count)
    return [RandomPlayer(name, random.Random(rng.getrandbits(64))) for name in names]
