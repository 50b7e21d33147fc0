"""Players: the seats at the table."""

from .ai import AI_NAMES, RandomPlayer, new_ai_players
from .base import Pass, PlayCards, Player, TurnAction
from .human import HumanPlayer

__all__ = [
    "AI_NAMES",
    "RandomPlayer",
    "new_ai_players",
    "Pass",
    "PlayCards",
    "Player",
    "TurnAction",
    "HumanPlayer",
]
