"""Set of digits backed by :class:`~novus.flags.Flags32`."""

from __future__ import annotations

from typing import Iterable, Iterator

from .digit import Digit, all_digits_iter
from .flags import Flags32


def digit_position(d: Digit) -> int:
    return d.get() - 1


class DigitSet:
    """Digit ``d`` is stored at bit ``d - 1``."""

    __slots__ = ("_flags",)

    def __init__(self, digits: Iterable[Digit] = ()) -> None:
        self._flags = Flags32()
        self.extend(digits)

    @classmethod
    def full(cls) -> "DigitSet":
        return cls(all_digits_iter())

    @classmethod
    def _from_flags(cls, flags: Flags32) -> "DigitSet":
        result = cls()
        result._flags = flags
        return result

    def contains(self, d: Digit) -> bool:
        return self._flags.get(digit_position(d))

    def is_empty(self) -> bool:
        return self._flags.num_set() == 0

    def clear(self) -> None:
        self._flags.clear()

    def set(self, d: Digit) -> None:
        self._flags.set(digit_position(d))

    def extend(self, digits: Iterable[Digit]) -> None:
        for d in digits:
            self.set(d)

    def remove(self, d: Digit) -> bool:
        """Drop ``d`` and report whether it was present."""

        if self.contains(d):
            self._flags.unset(digit_position(d))
            return True
        return False

    def copy(self) -> "DigitSet":
        return DigitSet._from_flags(self._flags.copy())

    def __contains__(self, d: object) -> bool:
        return isinstance(d, Digit) and self.contains(d)

    def __len__(self) -> int:
        return self._flags.num_set()

    def __iter__(self) -> Iterator[Digit]:
        return (d for d in all_digits_iter() if self.contains(d))

    def __and__(self, other: "DigitSet") -> "DigitSet":
        return DigitSet._from_flags(self._flags & other._flags)

    def __or__(self, other: "DigitSet") -> "DigitSet":
        return DigitSet._from_flags(self._flags | other._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSet):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"DigitSet({', '.join(str(d) for d in self)})"


__all__ = ["DigitSet", "digit_position"]
