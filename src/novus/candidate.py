"""Working per-cell candidate set used while solving."""

from __future__ import annotations

from typing import Iterable, Iterator

from .digit import Digit
from .digit_set import DigitSet
from .square import Square


class Candidate:
    """Digits still legal for one cell.

    A candidate derived from a fixed :class:`Square` starts empty; an empty
    candidate whose square is not fixed marks a dead branch.
    """

    __slots__ = ("digits",)

    def __init__(self, digits: DigitSet | None = None) -> None:
        self.digits = digits if digits is not None else DigitSet()

    @classmethod
    def new(cls, square: Square) -> "Candidate":
        return cls(DigitSet() if square.is_fixed() else DigitSet.full())

    def remove(self, digit: Digit) -> bool:
        return self.digits.remove(digit)

    def remove_iter(self, digits: Iterable[Digit]) -> bool:
        updated = False
        for d in digits:
            updated = self.remove(d) or updated
        return updated

    def has_candidate(self) -> bool:
        return not self.digits.is_empty()

    def contains(self, d: Digit) -> bool:
        return self.digits.contains(d)

    def is_fixed(self) -> bool:
        return len(self.digits) == 1

    def take_fixed_digit(self) -> Digit | None:
        """Return and clear the sole remaining digit, if exactly one remains."""

        if len(self.digits) != 1:
            return None
        fixed_digit = next(iter(self.digits))
        self.digits.clear()
        return fixed_digit

    def possible_digits(self) -> Iterator[Digit]:
        return iter(self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.digits == other.digits

    def __repr__(self) -> str:
        label = "Fixed" if self.is_fixed() else "Candidate"
        return f"{label}({', '.join(str(d) for d in self.digits)})"


__all__ = ["Candidate"]
