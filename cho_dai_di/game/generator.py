"""Enumeration of candidate plays from a hand."""

import logging
from itertools import combinations
from typing import Iterator

from cho_dai_di.models.card import THREE_OF_DIAMONDS, Hand

from .analyzer import VALID_PLAY_SIZES
from .validator import MoveValidator

logger = logging.getLogger(__name__)


def selections(hand: Hand, size: int) -> Iterator[Hand]:
    """Yield every selection of `size` cards from the hand, in hand order.

    Combinations rather than permutations: card order never changes what a
    play means, so each play is produced once.
    """
    for combo in combinations(hand, size):
        yield Hand(combo)


class PlayGenerator:
    """Lists the plays a hand can legally make."""

    def __init__(self, validator: MoveValidator | None = None):
        self.validator = validator or MoveValidator()

    def possible_plays(
        self,
        hand: Hand,
        last_play: Hand | None,
        first_play_of_game: bool,
    ) -> list[Hand]:
        """Find every legal play from the hand.

        Args:
            hand: Cards available to the player
            last_play: Trick to beat, or None at the start of a round
            first_play_of_game: True if nothing has been played yet this game

        Returns:
            Legal plays. Empty means the player must pass.
        """
        if last_play is not None:
            plays = [
                play
                for play in selections(hand, len(last_play))
                if self.validator.may_follow(last_play, play).is_valid
            ]
        elif first_play_of_game:
            # The opening play of the game must include the Three of Diamonds
            if THREE_OF_DIAMONDS not in hand:
                return []
            plays = [
                play
                for size in VALID_PLAY_SIZES
                for play in selections(hand, size)
                if THREE_OF_DIAMONDS in play
                and self.validator.analyzer.is_valid_shape(play)
            ]
        else:
            plays = [
                play
                for size in VALID_PLAY_SIZES
                for play in selections(hand, size)
                if self.validator.analyzer.is_valid_shape(play)
            ]

        logger.debug(f"{len(plays)} possible play(s) from {len(hand)} cards")
        return plays

    def has_legal_play(
        self,
        hand: Hand,
        last_play: Hand | None,
        first_play_of_game: bool,
    ) -> bool:
        """Check if the hand has at least one legal play."""
        return bool(self.possible_plays(hand, last_play, first_play_of_game))
