"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from cho_dai_di.models.card import Hand
    from cho_dai_di.players.base import Player


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game progress to stdout."""

    def __init__(
        self,
        show_hands: bool = False,
        output_fn: Callable[[str], None] = print,
    ):
        """Initialize display.

        Args:
            show_hands: Whether to show every player's hand each turn
            output_fn: Line output function
        """
        self.show_hands = show_hands
        self._out = output_fn

    def print_separator(self) -> None:
        """Print a separator line."""
        self._out("=" * 60)

    def print_game_start(self, player_name: str = "Player") -> None:
        """Print new game message."""
        self._out("Starting a new four-player game")
        self._out(f'Good luck {player_name}! Enter "help" if you need some guidance.')
        self._out("The player with the 3♦ will go first.")

    def print_blank(self) -> None:
        self._out("")

    def print_play(self, name: str, cards: "Hand", ends_round: bool) -> None:
        """Print an accepted play."""
        if ends_round:
            self._out(f"{name} plays {cards}, ending the round.")
        else:
            self._out(f"{name} plays {cards}")

    def print_pass(self, name: str) -> None:
        self._out(f"{name} will pass")

    def print_rejected(self, cards: "Hand", reason: str) -> None:
        """Print a play that broke the rules."""
        self._out(f"can't play '{cards}': {reason}")

    def print_not_held(self, name: str, cards: "Hand") -> None:
        """Print a play of cards the player does not have."""
        self._out(f"{name} doesn't have {cards} in their hand so the play is invalid")

    def print_hands(
        self,
        players: list["Player"],
        hands: list["Hand"],
    ) -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        for player, hand in zip(players, hands):
            self._out(f"  {player.name}: {hand}")

    def print_scores(
        self,
        players: list["Player"],
        scores: list[int],
    ) -> None:
        """Print the final score table, names padded to the longest."""
        width = max((len(p.name) for p in players), default=0)

        self._out("Game over. Let's see the scores:")
        self._out("")
        for player, score in zip(players, scores):
            self._out(f"\t{player.name:<{width}}:\t{score:+}")
        self._out("")

    def print_winner(self, player: "Player") -> None:
        self._out(f"Congratulations {player.name}!")

    def print_goodbye(self) -> None:
        self._out("Thank you for playing!")
