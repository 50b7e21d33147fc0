"""Session orchestrator: start -> play -> post-game -> end."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Union

from cho_dai_di.config import Config
from cho_dai_di.game.scoring import final_scores, winner_index
from cho_dai_di.game.session import FOUR_PLAYERS, GameSession
from cho_dai_di.logging import GameLogger
from cho_dai_di.models.card import Hand
from cho_dai_di.models.game_state import HandType
from cho_dai_di.players import HumanPlayer, Pass, PlayCards, Player, new_ai_players
from cho_dai_di.utils.logger import GameDisplay

logger = logging.getLogger(__name__)


@dataclass
class StartNewGame:
    """Deal a session and seat the players."""


@dataclass
class Play:
    """One turn per tick until a hand is empty."""

    session: GameSession
    players: list[Player]


@dataclass
class PostGame:
    """Score the finished game."""

    hand_sizes: list[int]
    players: list[Player]


@dataclass
class End:
    """Terminal state."""

    scores: list[int] = field(default_factory=list)


State = Union[StartNewGame, Play, PostGame, End]


class SessionOrchestrator:
    """Drives a GameSession through its public API and reports to the display."""

    def __init__(
        self,
        config: Config | None = None,
        display: GameDisplay | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
        players_factory: Callable[[random.Random], list[Player]] | None = None,
        session_factory: Callable[[random.Random], GameSession] | None = None,
    ):
        """Initialize orchestrator.

        Args:
            config: Configuration (uses defaults if not provided)
            display: GameDisplay for terminal output
            game_logger: GameLogger for the JSONL event log
            rng: Random source shared by the deal and the AI players
            players_factory: Builds the seats (defaults to one human, three AI)
            session_factory: Builds the session (defaults to a fresh deal)
        """
        self.config = config or Config()
        self.display = display or GameDisplay(show_hands=self.config.logging.show_hands)
        self.game_logger = game_logger or GameLogger()
        self.rng = rng or random.Random(self.config.game.seed)
        self._players_factory = players_factory or self._default_players
        self._session_factory = session_factory or (lambda rng: GameSession(rng=rng))

    def _default_players(self, rng: random.Random) -> list[Player]:
        if self.config.player.autoplay:
            return list(new_ai_players(FOUR_PLAYERS, rng))
        human: Player = HumanPlayer(self.config.player.name)
        return [human, *new_ai_players(FOUR_PLAYERS - 1, rng)]

    def run(self) -> End:
        """Tick from StartNewGame until End.

        Returns:
            The End state carrying the final scores.
        """
        state: State = StartNewGame()
        while not isinstance(state, End):
            state = self.tick(state)
        self.display.print_goodbye()
        return state

    def tick(self, state: State) -> State:
        """Advance the flow by one step."""
        if isinstance(state, StartNewGame):
            return self._start_new_game()
        if isinstance(state, Play):
            return self._play(state)
        if isinstance(state, PostGame):
            return self._post_game(state)
        return state

    def _start_new_game(self) -> Play:
        self.display.print_game_start(self.config.player.name)
        session = self._session_factory(self.rng)
        players = self._players_factory(self.rng)
        assert len(players) == session.num_players, "one player per seat"

        self.game_logger.log_game_start(
            [p.name for p in players],
            session.hands,
            session.whose_turn(),
        )
        logger.info(f"Seated: {', '.join(p.name for p in players)}")
        return Play(session=session, players=players)

    def _play(self, state: Play) -> State:
        """Run a single turn.

        A round ends either when the acting player's play contained the
        highest card left in anyone's hand (they keep the turn and lead the
        next round) or when enough consecutive passes have been made.
        """
        session = state.session
        self.display.print_blank()

        if session.is_game_ended():
            return PostGame(hand_sizes=session.hand_sizes(), players=state.players)

        current = session.whose_turn()
        player = state.players[current]
        self.display.print_hands(state.players, session.hands)

        round_won = False
        while True:
            action = player.take_turn(session, session.current_player_hand())

            if isinstance(action, PlayCards):
                cards = action.cards
                if not session.current_player_hand_includes(cards):
                    self.display.print_not_held(player.name, cards)
                    continue

                highest = session.highest_card_still_in_play()
                result = session.play_cards(cards)
                if not result.is_valid:
                    self.display.print_rejected(cards, result.error_message)
                    continue

                round_won = highest is not None and highest in cards
                self.display.print_play(player.name, cards, round_won)
                self._log_turn(session, current, "play", cards)
                break

            if isinstance(action, Pass):
                self.display.print_pass(player.name)
                session.pass_turn()
                self._log_turn(session, current, "pass", Hand())

                # Everyone else passed on the trick: start a new round
                if session.pass_counter == session.num_players - 1:
                    session.finish_round()
                    self.game_logger.log_special(
                        session.turn_counter, "round_end", current, {"reason": "all_passed"}
                    )
                break

            raise TypeError(f"{player.name} returned an unknown action: {action!r}")

        if round_won:
            session.finish_round(won_by=current)
            self.game_logger.log_special(
                session.turn_counter, "round_end", current, {"reason": "highest_card"}
            )
        else:
            session.increment_turn_counter()

        return state

    def _log_turn(self, session: GameSession, player_id: int, action: str, cards: Hand) -> None:
        hand_type = (
            session.validator.analyzer.analyze(cards).hand_type
            if cards
            else HandType.INVALID
        )
        self.game_logger.log_turn(
            session.turn_counter,
            player_id,
            action,
            cards,
            hand_type,
            session.last_play(),
            session.hands,
            session.pass_counter,
            session.round_state,
        )

    def _post_game(self, state: PostGame) -> End:
        scores = final_scores(state.hand_sizes)
        self.display.print_scores(state.players, scores)

        winner = winner_index(state.hand_sizes)
        if winner is not None:
            self.display.print_winner(state.players[winner])

        self.game_logger.log_game_end(state.hand_sizes, scores, winner)
        logger.info(f"Game over, scores: {scores}")
        return End(scores=scores)
