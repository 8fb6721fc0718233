"""Authoritative grid cell."""

from __future__ import annotations

from dataclasses import dataclass

from .digit import Digit
from .errors import InvalidDigit

PLACEHOLDER = "-"


@dataclass(slots=True)
class Square:
    """Either empty or holding a fixed digit; a fixed square never changes."""

    digit: Digit | None = None

    @classmethod
    def from_char(cls, c: str) -> "Square":
        try:
            return cls(Digit.from_char(c))
        except InvalidDigit:
            return cls(None)

    def is_fixed(self) -> bool:
        return self.digit is not None

    def fix_digit(self, digit: Digit) -> None:
        assert self.digit is None, f"square already fixed to {self.digit}"
        self.digit = digit

    def __str__(self) -> str:
        return PLACEHOLDER if self.digit is None else self.digit.to_char()


__all__ = ["PLACEHOLDER", "Square"]
