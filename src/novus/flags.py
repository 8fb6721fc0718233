"""Fixed-width flag vector underlying digit sets and position sets."""

from __future__ import annotations

from typing import Iterator

WIDTH = 32
_FULL = (1 << WIDTH) - 1


def mask_for(pos: int) -> int:
    assert 0 <= pos < WIDTH, f"flag position out of range: {pos}"
    return 1 << pos


class Flags32:
    """Mutable 32-bit set of small integers in ``[0, 32)``."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = bits & _FULL

    @property
    def bits(self) -> int:
        return self._bits

    def clear(self) -> None:
        self._bits = 0

    def num_set(self) -> int:
        return bin(self._bits).count("1")

    def get(self, pos: int) -> bool:
        return self._bits & mask_for(pos) != 0

    def set(self, pos: int) -> None:
        self._bits |= mask_for(pos)

    def unset(self, pos: int) -> None:
        self._bits &= ~mask_for(pos)

    def iter(self) -> Iterator[bool]:
        """Yield the state of every bit, lowest first."""

        for pos in range(WIDTH):
            yield self.get(pos)

    def copy(self) -> "Flags32":
        return Flags32(self._bits)

    def __and__(self, other: "Flags32") -> "Flags32":
        return Flags32(self._bits & other._bits)

    def __or__(self, other: "Flags32") -> "Flags32":
        return Flags32(self._bits | other._bits)

    def __invert__(self) -> "Flags32":
        return Flags32(~self._bits & _FULL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flags32):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"Flags32({self._bits:#010x})"


__all__ = ["Flags32", "WIDTH", "mask_for"]
