"""Scoring combinations and the checks that match a hand against them."""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple, Union
from .dice import Hand


class Combination(Enum):
    """Scoring combinations, declared in canonical evaluation order."""
    YAMS = "yams"
    STRAIGHT = "straight"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    THREE_OF_A_KIND = "three_of_a_kind"
    CHANCE = "chance"

    @property
    def display_name(self) -> str:
        names = {
            Combination.YAMS: "Yams",
            Combination.STRAIGHT: "Straight",
            Combination.FOUR_OF_A_KIND: "Four of a Kind",
            Combination.FULL_HOUSE: "Full House",
            Combination.THREE_OF_A_KIND: "Three of a Kind",
            Combination.CHANCE: "Chance",
        }
        return names[self]

    @property
    def base_score(self) -> Optional[int]:
        """Fixed score awarded on a match; None for Chance, which scores the dice."""
        return BASE_SCORES.get(self)

    @classmethod
    def from_name(cls, name: str) -> "Combination":
        """Look up a combination by value or display name, ignoring case and separators."""
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for combination in cls:
            if key in (combination.value, combination.value.replace("_", "")):
                return combination
        raise ValueError(f"Unknown combination: {name}")

    def __str__(self) -> str:
        return self.display_name


BASE_SCORES = MappingProxyType({
    Combination.YAMS: 50,
    Combination.STRAIGHT: 40,
    Combination.FOUR_OF_A_KIND: 35,
    Combination.FULL_HOUSE: 30,
    Combination.THREE_OF_A_KIND: 28,
})

STRAIGHTS = ((1, 2, 3, 4, 5), (2, 3, 4, 5, 6))


@dataclass(frozen=True)
class Matched:
    """The hand satisfies the combination and earns `score` points."""
    score: int


@dataclass(frozen=True)
class NotMatched:
    """The hand does not satisfy the combination."""


NOT_MATCHED = NotMatched()

CombinationResult = Union[Matched, NotMatched]


def result_rank(result: CombinationResult) -> Tuple[int, int]:
    """Sort key placing every NotMatched below every Matched, then by score."""
    if isinstance(result, Matched):
        return 1, result.score
    return 0, 0


def _highest_count(hand: Hand) -> int:
    return max(hand.value_counts.values())


def check_yams(hand: Hand) -> CombinationResult:
    if _highest_count(hand) == 5:
        return Matched(BASE_SCORES[Combination.YAMS])
    return NOT_MATCHED


def check_straight(hand: Hand) -> CombinationResult:
    if hand.sorted_values in STRAIGHTS:
        return Matched(BASE_SCORES[Combination.STRAIGHT])
    return NOT_MATCHED


def check_four_of_a_kind(hand: Hand) -> CombinationResult:
    if _highest_count(hand) >= 4:
        return Matched(BASE_SCORES[Combination.FOUR_OF_A_KIND])
    return NOT_MATCHED


def check_full_house(hand: Hand) -> CombinationResult:
    # a triple and a pair of distinct values; five of a kind is not a full house
    if sorted(hand.value_counts.values()) == [2, 3]:
        return Matched(BASE_SCORES[Combination.FULL_HOUSE])
    return NOT_MATCHED


def check_three_of_a_kind(hand: Hand) -> CombinationResult:
    if _highest_count(hand) >= 3:
        return Matched(BASE_SCORES[Combination.THREE_OF_A_KIND])
    return NOT_MATCHED


def check_chance(hand: Hand) -> CombinationResult:
    return Matched(hand.total)


CHECKERS: Mapping[Combination, Callable[[Hand], CombinationResult]] = MappingProxyType({
    Combination.YAMS: check_yams,
    Combination.STRAIGHT: check_straight,
    Combination.FOUR_OF_A_KIND: check_four_of_a_kind,
    Combination.FULL_HOUSE: check_full_house,
    Combination.THREE_OF_A_KIND: check_three_of_a_kind,
    Combination.CHANCE: check_chance,
})


def evaluate(combination: Combination, hand: Hand) -> CombinationResult:
    """Check `hand` against a single combination."""
    return CHECKERS[combination](hand)
