"""Bounded digit value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import InvalidDigit

MIN_DIGIT = 1
MAX_DIGIT = 9


@dataclass(frozen=True, order=True, slots=True)
class Digit:
    """A Sudoku digit in ``[1, 9]``."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidDigit(self.value)
        if not MIN_DIGIT <= self.value <= MAX_DIGIT:
            raise InvalidDigit(self.value)

    @classmethod
    def from_char(cls, value: str) -> "Digit":
        if len(value) != 1 or not value.isdigit() or not value.isascii():
            raise InvalidDigit(value)
        return cls(int(value))

    @classmethod
    def from_int(cls, value: int) -> "Digit":
        return cls(value)

    def get(self) -> int:
        return self.value

    def to_char(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Digit({self.value})"


_ALL_DIGITS: Tuple[Digit, ...] = tuple(Digit(n) for n in range(MIN_DIGIT, MAX_DIGIT + 1))


def all_digits() -> Tuple[Digit, ...]:
    return _ALL_DIGITS


def all_digits_iter() -> Iterator[Digit]:
    return iter(_ALL_DIGITS)


__all__ = ["Digit", "MAX_DIGIT", "MIN_DIGIT", "all_digits", "all_digits_iter"]
