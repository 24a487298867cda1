"""Core scoring engine for Yams."""
from .dice import Dice, Hand, InvalidHandError, as_hand
from .combinations import (
    CHECKERS, Combination, CombinationResult, Matched, NOT_MATCHED, NotMatched, evaluate,
)
from .scoring import best_score, evaluate_all, score_round
from .game import Game, RoundResult, score_game

__all__ = [
    "Dice",
    "Hand",
    "InvalidHandError",
    "as_hand",
    "CHECKERS",
    "Combination",
    "CombinationResult",
    "Matched",
    "NOT_MATCHED",
    "NotMatched",
    "evaluate",
    "best_score",
    "evaluate_all",
    "score_round",
    "Game",
    "RoundResult",
    "score_game",
]
