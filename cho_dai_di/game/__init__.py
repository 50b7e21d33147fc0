"""Game logic."""

from .analyzer import AnalysisError, HandAnalysis, HandAnalyzer
from .generator import PlayGenerator
from .precedence import SortCardsBy, cmp_card, highest_card, lowest_card
from .scoring import final_scores, hand_size_to_score, winner_index
from .session import FOUR_PLAYERS, CardsNotHeldError, GameSession
from .validator import MoveValidator, ValidationResult

__all__ = [
    "AnalysisError",
    "HandAnalysis",
    "HandAnalyzer",
    "PlayGenerator",
    "SortCardsBy",
    "cmp_card",
    "highest_card",
    "lowest_card",
    "final_scores",
    "hand_size_to_score",
    "winner_index",
    "FOUR_PLAYERS",
    "CardsNotHeldError",
    "GameSession",
    "MoveValidator",
    "ValidationResult",
]
