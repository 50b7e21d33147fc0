"""Tests for the JSONL game logger."""

import json

import pytest

from cho_dai_di.config import GameLogConfig
from cho_dai_di.logging import GameLogger, format_card, format_cards, format_hands
from cho_dai_di.models.card import Card, Hand
from cho_dai_di.models.game_state import HandType, RoundState


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "game.jsonl"


def read_events(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestFormatters:
    """Tests for card formatters."""

    def test_format_card(self):
        assert format_card(Card.parse("10H")) == "10H"

    def test_format_cards(self):
        assert format_cards(Hand.of("3D", "QS")) == "3D,QS"
        assert format_cards(Hand()) == ""

    def test_format_hands(self):
        hands = [Hand.of("3D"), Hand.of("4C", "2S")]
        assert format_hands(hands) == {"0": "3D", "1": "4C,2S"}


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_disabled_writes_nothing(self, log_path):
        with GameLogger(GameLogConfig(enabled=False, output_path=str(log_path))) as game_logger:
            game_logger.log_special(0, "round_end", 0)
        assert not log_path.exists()

    def test_events(self, log_path):
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        hands = [Hand.of("3D", "4D"), Hand.of("5C")]

        with GameLogger(config) as game_logger:
            game_logger.log_game_start(["Alice", "ChoBot"], hands, 0)
            game_logger.log_turn(
                0,
                0,
                "play",
                Hand.of("3D"),
                HandType.SINGLE,
                Hand.of("3D"),
                [Hand.of("4D"), Hand.of("5C")],
                0,
                RoundState.IN_PROGRESS,
            )
            game_logger.log_special(1, "round_end", 1, {"reason": "all_passed"})
            game_logger.log_game_end([0, 1], [1, -1], 0)

        events = read_events(log_path)

        assert [e["type"] for e in events] == ["game_start", "turn", "special", "game_end"]
        assert events[0]["players"][1] == {"id": 1, "name": "ChoBot"}
        assert events[0]["hands"] == {"0": "3D,4D", "1": "5C"}
        assert events[1]["cards"] == "3D"
        assert events[1]["hand_type"] == "single"
        assert events[1]["state"] == {"pass_counter": 0, "round": "in_progress"}
        assert events[2]["detail"] == {"reason": "all_passed"}
        assert events[3]["winner"] == 0

    def test_pass_turn_has_no_last_play(self, log_path):
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        with GameLogger(config) as game_logger:
            game_logger.log_turn(
                3, 1, "pass", Hand(), HandType.INVALID, None, [], 1,
                RoundState.AWAITING_OPENING_PLAY,
            )

        event = read_events(log_path)[0]
        assert event["cards"] == ""
        assert event["last_play"] == ""
