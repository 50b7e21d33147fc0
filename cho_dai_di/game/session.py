"""Game session: deck, hands, trick history and turn/round bookkeeping."""

from __future__ import annotations

import logging
import random

from cho_dai_di.models.card import THREE_OF_DIAMONDS, Card, Hand, shuffled_deck
from cho_dai_di.models.game_state import GameState, RoundState

from .generator import PlayGenerator
from .precedence import highest_card
from .scoring import final_scores
from .validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)

FOUR_PLAYERS = 4


class CardsNotHeldError(ValueError):
    """Raised when a play includes cards the acting player does not hold."""


class GameSession:
    """Authoritative state of one game of Cho Dai Di.

    Turn order is ``turn_counter % num_players``. Round transitions are left
    to the caller through the primitive mutators (reset_pass_counter,
    unset_last_play, increment_turn_counter) or the finish_round shortcut.
    """

    def __init__(
        self,
        hands: list[Hand] | None = None,
        *,
        num_players: int = FOUR_PLAYERS,
        rng: random.Random | None = None,
        validator: MoveValidator | None = None,
    ):
        """Initialize session.

        Args:
            hands: Pre-built hands (one per seat). Dealt from a shuffled deck
                if not provided.
            num_players: Number of seats when dealing
            rng: Random source for the shuffle
            validator: MoveValidator instance (creates one if not provided)
        """
        self.validator = validator or MoveValidator()
        self.generator = PlayGenerator(self.validator)
        self.state = GameState()

        if hands is None:
            self.deck = shuffled_deck(rng)
            self.hands = self._deal(num_players)
        else:
            self.deck = Hand()
            self.hands = [hand.copy() for hand in hands]

        assert self.hands, "a game needs at least one player"
        self.scores: list[int] = [0] * len(self.hands)

        # The player holding the Three of Diamonds goes first
        for i, hand in enumerate(self.hands):
            if THREE_OF_DIAMONDS in hand:
                self.state.turn_counter = i
                break

        logger.info(
            f"New game: {len(self.hands)} players, "
            f"player {self.whose_turn()} holds the 3♦"
        )

    def _deal(self, num_players: int) -> list[Hand]:
        """Deal one card at a time until fewer cards than players remain."""
        hands = [Hand() for _ in range(num_players)]
        while len(self.deck) >= num_players:
            for hand in hands:
                hand.add(self.deck.pop())

        logger.debug(f"Dealt {len(hands[0])} cards each, {len(self.deck)} left over")
        return hands

    # --- Queries ---

    @property
    def num_players(self) -> int:
        return len(self.hands)

    @property
    def turn_counter(self) -> int:
        return self.state.turn_counter

    @property
    def pass_counter(self) -> int:
        """Consecutive passes since the last accepted play or round reset."""
        return self.state.pass_counter

    @property
    def discard_pile(self) -> list[Card]:
        return list(self.state.discard_pile)

    @property
    def round_state(self) -> RoundState:
        return self.state.round_state

    @property
    def round_leader(self) -> int | None:
        return self.state.round_leader

    def whose_turn(self) -> int:
        """Index of the player to act."""
        return self.state.turn_counter % self.num_players

    def current_player_hand(self) -> Hand:
        """Copy of the acting player's hand."""
        return self.hands[self.whose_turn()].copy()

    def current_player_hand_includes(self, cards: Hand) -> bool:
        """Check that the acting player holds every given card."""
        return self.hands[self.whose_turn()].contains_all(cards)

    def hand_sizes(self) -> list[int]:
        return [len(hand) for hand in self.hands]

    def last_play(self) -> Hand | None:
        """The trick to beat, or None at the start of a round."""
        last = self.state.last_play
        return last.copy() if last is not None else None

    def is_first_play_of_game(self) -> bool:
        return not self.state.discard_pile

    def is_round_ended(self) -> bool:
        """True once every player has passed without an intervening play."""
        return self.state.pass_counter >= self.num_players

    def is_game_ended(self) -> bool:
        """True as soon as any hand is empty."""
        return any(hand.is_empty() for hand in self.hands)

    def highest_card_still_in_play(self) -> Card | None:
        """Highest card across all players' remaining hands."""
        return highest_card(card for hand in self.hands for card in hand)

    def is_valid_play(self, cards: Hand) -> ValidationResult:
        """Check a play against the current trick (or opening rules).

        Args:
            cards: The submitted play

        Returns:
            ValidationResult
        """
        last_play = self.state.last_play
        if last_play is not None:
            return self.validator.may_follow(last_play, cards)
        return self.validator.validate_opening(cards, self.is_first_play_of_game())

    def possible_plays(self, hand: Hand) -> list[Hand]:
        """Legal plays from the given hand against the current state."""
        return self.generator.possible_plays(
            hand,
            self.state.last_play,
            self.is_first_play_of_game(),
        )

    # --- Mutations ---

    def play_cards(self, cards: Hand) -> ValidationResult:
        """Play cards for the acting player.

        On success the cards leave the player's hand, become the trick to
        beat and are added to the discard pile. On failure nothing changes.

        Args:
            cards: The submitted play

        Returns:
            ValidationResult

        Raises:
            CardsNotHeldError: If the player does not hold all the cards.
        """
        player = self.whose_turn()
        if not self.current_player_hand_includes(cards):
            raise CardsNotHeldError(f"player {player} does not hold {cards}")

        result = self.is_valid_play(cards)
        if not result.is_valid:
            logger.debug(f"Player {player} rejected play {cards}: {result.error_message}")
            return result

        played = cards.copy()
        self.hands[player].retain(lambda c: c not in played)

        if self.state.last_play is None:
            self.state.round_state = RoundState.IN_PROGRESS
            self.state.round_leader = player
        self.state.last_play = played
        self.state.discard_pile.extend(played)
        self.state.pass_counter = 0

        logger.debug(f"Player {player} played: {played}")
        return result

    def pass_turn(self) -> None:
        """Record a pass. Does not advance the turn."""
        self.state.pass_counter += 1
        logger.debug(f"Player {self.whose_turn()} passed ({self.state.pass_counter})")

    def reset_pass_counter(self) -> None:
        self.state.pass_counter = 0

    def unset_last_play(self) -> None:
        """Clear the trick; the next play opens a new round."""
        self.state.last_play = None
        self.state.round_state = RoundState.AWAITING_OPENING_PLAY
        self.state.round_leader = None

    def increment_turn_counter(self) -> None:
        self.state.turn_counter += 1

    def finish_round(self, won_by: int | None = None) -> None:
        """End the round.

        Args:
            won_by: Player who played the highest remaining card. They keep
                the turn and lead the next round. None when the round ended
                because everyone passed.
        """
        self.state.reset_for_new_round(won_by)
        logger.info(
            "Round ended"
            + (f", won by player {won_by}" if won_by is not None else ", all passed")
        )

    def compute_scores(self) -> list[int]:
        """Compute and store final scores.

        Raises:
            RuntimeError: If the game has not ended.
        """
        if not self.is_game_ended():
            raise RuntimeError("scores are only available once the game has ended")
        self.scores = final_scores(self.hand_sizes())
        return list(self.scores)

    def __str__(self) -> str:
        return f"GameSession(player {self.whose_turn()} to act, {self.state})"
