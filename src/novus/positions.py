"""Offsets within a single scan scope (row, column or block)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, TypeVar

from .flags import Flags32

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .board import BlockPosition

T = TypeVar("T")


class Positions:
    """Set of scope offsets; offset 0 is the first cell of the scope."""

    __slots__ = ("_flags",)

    def __init__(self, flags: Flags32 | None = None) -> None:
        self._flags = flags.copy() if flags is not None else Flags32()

    @classmethod
    def with_positions(cls, offsets: Iterable[int]) -> "Positions":
        flags = Flags32()
        for i in offsets:
            flags.set(i)
        return cls(flags)

    @classmethod
    def with_offset(cls, offset: int, num: int) -> "Positions":
        return cls.with_positions(range(offset, offset + num))

    def set(self, pos: int) -> None:
        self._flags.set(pos)

    def contains(self, pos: int) -> bool:
        return self._flags.get(pos)

    def num_set(self) -> int:
        return self._flags.num_set()

    def iter(self) -> Iterator[int]:
        return (i for i, b in enumerate(self._flags.iter()) if b)

    def items_from_iter(self, items: Iterable[T]) -> Iterator[T]:
        """Select the items of ``items`` whose offsets are in the set."""

        return (item for i, item in enumerate(items) if self._flags.get(i))

    def belongs_to(self, other: "Positions") -> bool:
        return (self._flags & other._flags) == self._flags

    def and_(self, other: "Positions") -> "Positions":
        return Positions(self._flags & other._flags)

    def or_(self, other: "Positions") -> "Positions":
        return Positions(self._flags | other._flags)

    def invert(self, max_length: int) -> "Positions":
        """Complement within ``[0, max_length)``."""

        mask = Flags32((1 << max_length) - 1)
        return Positions(~self._flags & mask)

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, int) and self.contains(pos)

    def __iter__(self) -> Iterator[int]:
        return self.iter()

    def __len__(self) -> int:
        return self.num_set()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Positions):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"Positions({', '.join(str(i) for i in self)})"


@dataclass(frozen=True)
class RowPositions:
    row: int
    columns: Positions


@dataclass(frozen=True)
class ColumnPositions:
    column: int
    rows: Positions


@dataclass(frozen=True)
class BlockPositions:
    block_at: "BlockPosition"
    indexes: Positions


__all__ = ["BlockPositions", "ColumnPositions", "Positions", "RowPositions"]
