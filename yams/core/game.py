"""Game scoring: feeds hands round by round and tracks used combinations."""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set
from .combinations import Combination
from .dice import Hand, HandLike, as_hand
from .scoring import score_round


logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of a single round."""
    round_number: int
    hand: Hand
    combination: Optional[Combination] = None
    score: int = 0

    @property
    def awarded(self) -> bool:
        return self.combination is not None

    def __str__(self) -> str:
        if not self.awarded:
            return f"Round {self.round_number}: {self.hand} -> no award"
        return f"Round {self.round_number}: {self.hand} -> {self.combination}: {self.score} points"


class Game:
    """Manages a full game: available combinations and the running total."""

    def __init__(self):
        self.available: Set[Combination] = set(Combination)
        self.total_score = 0
        self.round_history: List[RoundResult] = []

    @property
    def rounds_played(self) -> int:
        return len(self.round_history)

    @property
    def unused_combinations(self) -> List[Combination]:
        """Combinations still available, in canonical order."""
        return [c for c in Combination if c in self.available]

    @property
    def is_exhausted(self) -> bool:
        """True once every combination has been awarded."""
        return not self.available

    def play_round(self, hand: HandLike) -> RoundResult:
        """Score one hand and consume the awarded combination."""
        hand = as_hand(hand)
        result = RoundResult(round_number=self.rounds_played + 1, hand=hand)

        award = score_round(hand, self.available)
        if award is None:
            logger.debug("Round %d: %s matched no available combination", result.round_number, hand)
        else:
            combination, score = award
            self.available.discard(combination)
            self.total_score += score
            result.combination = combination
            result.score = score
            logger.debug(
                "Round %d: %s awarded %s for %d points (total %d)",
                result.round_number, hand, combination.display_name, score, self.total_score,
            )

        self.round_history.append(result)
        return result

    def play(self, hands: Iterable[HandLike]) -> int:
        """Play each hand in order and return the total score."""
        for hand in hands:
            self.play_round(hand)
        return self.total_score

    def reset(self):
        """Start a new game."""
        self.available = set(Combination)
        self.total_score = 0
        self.round_history = []

    def get_game_state(self) -> Dict:
        """Get current game state."""
        return {
            "total_score": self.total_score,
            "rounds_played": self.rounds_played,
            "unused_combinations": [c.value for c in self.unused_combinations],
            "exhausted": self.is_exhausted,
        }


def score_game(hands: Iterable[HandLike]) -> int:
    """Score a whole game, one hand per round, and return the total."""
    return Game().play(hands)
