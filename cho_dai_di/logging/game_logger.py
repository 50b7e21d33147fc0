"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from cho_dai_di.config import GameLogConfig
from cho_dai_di.models.card import Hand
from cho_dai_di.models.game_state import HandType, RoundState

from .formatters import format_cards, format_hands


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(
        self,
        player_names: list[str],
        hands: list[Hand],
        first_player: int,
    ) -> None:
        """Log game start with initial hands.

        Args:
            player_names: Names indexed by seat.
            hands: Initial hands indexed by seat.
            first_player: Seat holding the Three of Diamonds.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"id": i, "name": name}
                for i, name in enumerate(player_names)
            ],
            "hands": format_hands(hands),
            "first_player": first_player,
        })

    def log_turn(
        self,
        turn_num: int,
        player_id: int,
        action: str,
        cards: Hand,
        hand_type: HandType,
        last_play: Hand | None,
        hands: list[Hand],
        pass_counter: int,
        round_state: RoundState,
    ) -> None:
        """Log a single turn.

        Args:
            turn_num: Turn counter when the action was taken.
            player_id: Seat that took the action.
            action: "play" or "pass".
            cards: Cards played (empty if pass).
            hand_type: Type of cards played.
            last_play: Trick on the table after the action.
            hands: All players' hands after the action.
            pass_counter: Consecutive passes after the action.
            round_state: Round lifecycle state after the action.
        """
        self._write({
            "type": "turn",
            "turn": turn_num,
            "player": player_id,
            "action": action,
            "cards": format_cards(cards),
            "hand_type": hand_type.value,
            "last_play": format_cards(last_play) if last_play is not None else "",
            "hands": format_hands(hands),
            "state": {
                "pass_counter": pass_counter,
                "round": round_state.value,
            },
        })

    def log_special(
        self,
        turn_num: int,
        event: str,
        player_id: int,
        detail: dict[str, Any] | None = None,
    ) -> None:
        """Log a special event.

        Args:
            turn_num: Turn counter when the event occurred.
            event: Event type (e.g., "round_end").
            player_id: Player who triggered the event.
            detail: Additional event details.
        """
        record: dict[str, Any] = {
            "type": "special",
            "turn": turn_num,
            "event": event,
            "player": player_id,
        }
        if detail:
            record["detail"] = detail
        self._write(record)

    def log_game_end(
        self,
        hand_sizes: list[int],
        scores: list[int],
        winner: int | None,
    ) -> None:
        """Log game end with results.

        Args:
            hand_sizes: Final hand sizes indexed by seat.
            scores: Final scores indexed by seat.
            winner: Seat with the empty hand.
        """
        self._write({
            "type": "game_end",
            "hand_sizes": hand_sizes,
            "scores": scores,
            "winner": winner,
        })
