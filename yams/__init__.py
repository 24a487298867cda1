"""
Yams - scores rounds of the five-dice game and totals them over a game.
"""
from .core import (
    Combination, Game, Hand, InvalidHandError, Matched, NotMatched, score_game, score_round,
)

__version__ = "0.1.0"

__all__ = [
    "Combination",
    "Game",
    "Hand",
    "InvalidHandError",
    "Matched",
    "NotMatched",
    "score_game",
    "score_round",
]
