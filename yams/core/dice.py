from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
import numbers
import random
import re
from collections import Counter


HAND_SIZE = 5
DIE_FACES = range(1, 7)


class InvalidHandError(ValueError):
    """Raised when a hand does not hold exactly five dice valued 1 to 6."""


@dataclass(frozen=True)
class Hand:
    """The five dice rolled in one round."""
    values: Tuple[int, ...]

    def __post_init__(self):
        values = tuple(self.values)
        if len(values) != HAND_SIZE:
            raise InvalidHandError(f"A hand holds exactly {HAND_SIZE} dice, got {len(values)}")
        for v in values:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise InvalidHandError(f"Dice values must be integers, got {v!r}")
            if v not in DIE_FACES:
                raise InvalidHandError(f"Dice values must be between 1 and 6, got {v}")
        # numpy and other integral types are stored as plain ints
        object.__setattr__(self, "values", tuple(int(v) for v in values))

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """Build a hand from text such as '33325', '3 3 3 2 5' or '3,3,3,2,5'."""
        stripped = text.strip()
        if re.fullmatch(r"\d+", stripped):
            tokens = list(stripped)
        else:
            tokens = [t for t in re.split(r"[\s,]+", stripped) if t]
        try:
            values = tuple(int(t) for t in tokens)
        except ValueError:
            raise InvalidHandError(f"Cannot read dice values from {text!r}") from None
        return cls(values)

    @property
    def value_counts(self) -> Counter:
        """Count of each dice value."""
        return Counter(self.values)

    @property
    def sorted_values(self) -> Tuple[int, ...]:
        return tuple(sorted(self.values))

    @property
    def total(self) -> int:
        """Sum of all five dice."""
        return sum(self.values)

    def __iter__(self):
        return iter(self.values)

    def __str__(self) -> str:
        return " ".join(f"[{v}]" for v in self.values)


HandLike = Union[Hand, Sequence[int]]


def as_hand(value: HandLike) -> Hand:
    """Return `value` as a validated Hand."""
    if isinstance(value, Hand):
        return value
    return Hand(tuple(value))


class Dice:
    """Rolls five-dice hands."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def roll(self) -> Hand:
        """Roll all five dice and return the result."""
        return Hand(tuple(self._random.randint(1, 6) for _ in range(HAND_SIZE)))

    def roll_specific(self, values: Sequence[int]) -> Hand:
        """Create a hand with specific values (for testing/input)."""
        return Hand(tuple(values))
