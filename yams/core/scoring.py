from typing import Dict, Iterable, Optional, Tuple
from .combinations import Combination, CombinationResult, Matched, evaluate, result_rank
from .dice import HandLike, as_hand


Award = Tuple[Combination, int]


def evaluate_all(hand: HandLike, available: Iterable[Combination]) -> Dict[Combination, CombinationResult]:
    """Evaluate every available combination, in canonical order."""
    hand = as_hand(hand)
    available = set(available)
    return {
        combination: evaluate(combination, hand)
        for combination in Combination
        if combination in available
    }


def score_round(hand: HandLike, available: Iterable[Combination]) -> Optional[Award]:
    """Pick the best-scoring available combination for a hand.

    Only combinations in `available` are considered. Ties on score go to the
    combination that comes first in canonical order. Returns None when no
    available combination matches (possible only once Chance has been used).
    """
    results = evaluate_all(hand, available)
    matched = [(c, r) for c, r in results.items() if isinstance(r, Matched)]
    if not matched:
        return None
    # max() keeps the first of equal keys, so canonical order breaks ties
    combination, result = max(matched, key=lambda item: result_rank(item[1]))
    return combination, result.score


def best_score(hand: HandLike) -> int:
    """Score a hand with every combination available."""
    _, score = score_round(hand, Combination)
    return score
