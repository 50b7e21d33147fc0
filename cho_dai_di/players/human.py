"""Terminal player."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cho_dai_di.game.precedence import SortCardsBy, sort_hand
from cho_dai_di.models.card import CardParseError, Hand

from .base import Pass, PlayCards, Player, TurnAction

if TYPE_CHECKING:
    from cho_dai_di.game.session import GameSession

HELP_TEXT = (
    "Enter the space-separated list of the cards you want to play",
    "For example: '2c 3h 4d 5s 6s' or '2C 2D 2H' or 'jc'",
    "You may pass your turn: enter 'p' or 'pass'",
    "You may quit the game: enter 'q' or 'quit'",
    "You may toggle between sorting by rank and sorting by suit: enter 'sort'",
)


class HumanPlayer(Player):
    """Reads plays from the terminal."""

    def __init__(
        self,
        name: str,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        """Initialize player.

        Args:
            name: Display name
            input_fn: Prompt-and-read function
            output_fn: Line output function
        """
        self._name = name
        self.sort_cards_by = SortCardsBy.RANK
        self._input = input_fn
        self._output = output_fn

    @property
    def name(self) -> str:
        return self._name

    def toggle_sort_order(self) -> None:
        self.sort_cards_by = self.sort_cards_by.toggled()

    def take_turn(self, session: GameSession, hand: Hand) -> TurnAction:
        while True:
            sort_hand(hand, self.sort_cards_by)
            self._output("")
            last_play = session.last_play()
            if last_play is not None:
                self._output(f"Last play: {last_play}")
            self._output(f"{self.name}'s hand: {hand}")

            command = self._input("Your play: ").strip()
            lowered = command.lower()

            if lowered in ("p", "pass"):
                return Pass()

            if lowered in ("q", "quit"):
                self._output("Quitting immediately. Thanks for playing.")
                raise SystemExit(0)

            if lowered in ("", "help"):
                for line in HELP_TEXT:
                    self._output(line)
                continue

            if lowered == "sort":
                self.toggle_sort_order()
                self._output(f"hand rearranged by {self.sort_cards_by.value}")
                continue

            try:
                cards = Hand.parse(command)
            except CardParseError as e:
                self._output(f"invalid input: {e}")
                continue

            return PlayCards(cards)
