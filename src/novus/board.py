"""Block-structured grid container with row, column and block views.

A board of ``block_size`` holds ``block_size ** 2`` rows and columns and is
partitioned into ``block_size`` x ``block_size`` blocks.  Every scope view
yields its items in a fixed order: left to right for rows, top to bottom for
columns and row-major for blocks, so offset ``0`` is always the first cell of
the scope.  Filters rely on that order when they build
:class:`~novus.positions.Positions` masks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Sequence, TypeVar

from .candidate import Candidate
from .digit import Digit
from .errors import BoardError
from .square import Square

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class ItemPosition:
    row: int
    col: int

    def __str__(self) -> str:
        return f"Item({self.row}, {self.col})"


@dataclass(frozen=True, order=True)
class BlockPosition:
    row: int
    col: int

    def __str__(self) -> str:
        return f"Block({self.row}, {self.col})"


class ScopeKind(str, Enum):
    ROW = "row"
    COLUMN = "column"
    BLOCK = "block"


@dataclass(frozen=True)
class Scope:
    """A row, column or block identity."""

    kind: ScopeKind
    index: int | BlockPosition

    @classmethod
    def row(cls, row: int) -> "Scope":
        return cls(ScopeKind.ROW, row)

    @classmethod
    def column(cls, col: int) -> "Scope":
        return cls(ScopeKind.COLUMN, col)

    @classmethod
    def block(cls, pos: BlockPosition) -> "Scope":
        return cls(ScopeKind.BLOCK, pos)

    def __str__(self) -> str:
        if self.kind is ScopeKind.BLOCK:
            return str(self.index)
        return f"{self.kind.value.capitalize()}({self.index})"


def enumerate_table_positions(num_rows: int, num_cols: int) -> Iterator[tuple[int, int]]:
    for row in range(num_rows):
        for col in range(num_cols):
            yield row, col


class BoardBlock(Generic[T]):
    """Row-major view over one block with sub-views for its rows and columns."""

    __slots__ = ("_items", "block_size")

    def __init__(self, items: Sequence[T], block_size: int) -> None:
        self._items = items
        self.block_size = block_size

    def row_items(self, block_row: int) -> Iterator[T]:
        assert 0 <= block_row < self.block_size
        offset = block_row * self.block_size
        return iter(self._items[offset : offset + self.block_size])

    def column_items(self, block_col: int) -> Iterator[T]:
        assert 0 <= block_col < self.block_size
        return iter(self._items[block_col :: self.block_size])

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Board(Generic[T]):
    """Uniform addressed storage plus scope iteration."""

    def __init__(self, items: Iterable[T], block_size: int, num_blocks: int) -> None:
        self._items: List[T] = list(items)
        self._block_size = block_size
        self._num_blocks = num_blocks
        assert num_blocks == block_size, "boards must have block_size blocks per side"
        assert len(self._items) == self.width() * self.height(), "item count must match geometry"

    # Geometry ---------------------------------------------------------

    def block_size(self) -> int:
        return self._block_size

    def num_blocks(self) -> int:
        return self._num_blocks

    def width(self) -> int:
        return self._block_size * self._num_blocks

    def height(self) -> int:
        return self._block_size * self._num_blocks

    def each_rows(self) -> range:
        return range(self.height())

    def each_columns(self) -> range:
        return range(self.width())

    def each_block_rows(self) -> range:
        return range(self._block_size)

    def each_block_columns(self) -> range:
        return range(self._block_size)

    def block_item_indexes(self) -> range:
        return range(self._block_size * self._block_size)

    def block_positions(self) -> Iterator[BlockPosition]:
        for row, col in enumerate_table_positions(self._num_blocks, self._num_blocks):
            yield BlockPosition(row, col)

    def item_positions(self) -> Iterator[ItemPosition]:
        for row, col in enumerate_table_positions(self.height(), self.width()):
            yield ItemPosition(row, col)

    def block_of(self, pos: ItemPosition) -> BlockPosition:
        return BlockPosition(pos.row // self._block_size, pos.col // self._block_size)

    # Read access ------------------------------------------------------

    def items(self) -> Iterator[T]:
        return iter(self._items)

    def item_at(self, pos: ItemPosition) -> T:
        return self._items[self._index_of(pos.row, pos.col)]

    def row_items(self, row: int) -> Iterator[T]:
        start = self._index_of(row, 0)
        return iter(self._items[start : start + self.width()])

    def column_items(self, col: int) -> Iterator[T]:
        start = self._index_of(0, col)
        return iter(self._items[start :: self.width()])

    def block_at(self, pos: BlockPosition) -> BoardBlock[T]:
        assert 0 <= pos.row < self._num_blocks
        assert 0 <= pos.col < self._num_blocks

        row = pos.row * self._block_size
        col = pos.col * self._block_size
        items: List[T] = []
        for row_offset in self.each_block_rows():
            start = self._index_of(row + row_offset, col)
            items.extend(self._items[start : start + self._block_size])
        return BoardBlock(items, self._block_size)

    def _index_of(self, row: int, col: int) -> int:
        assert 0 <= row < self.height(), f"row out of range: {row}"
        assert 0 <= col < self.width(), f"column out of range: {col}"
        return row * self.width() + col


class SquareBoard(Board[Square]):
    """Authoritative grid; written only through :meth:`fix_digit_at`."""

    def fix_digit_at(self, pos: ItemPosition, digit: Digit) -> None:
        assert not self.item_at(pos).is_fixed(), f"square {pos} already fixed"
        DuplicationValidator(self).validate(pos, digit)
        self.item_at(pos).fix_digit(digit)

    def is_complete(self) -> bool:
        return all(sq.is_fixed() for sq in self._items)

    def validate(self) -> None:
        validator = DuplicationValidator(self)
        for row in self.each_rows():
            validator.validate_with_scope(Scope.row(row), None)
        for col in self.each_columns():
            validator.validate_with_scope(Scope.column(col), None)
        for block_pos in self.block_positions():
            validator.validate_with_scope(Scope.block(block_pos), None)

    def clone(self) -> "SquareBoard":
        return SquareBoard(
            (Square(sq.digit) for sq in self._items), self._block_size, self._num_blocks
        )

    def to_string(self, placeholder: str = "0") -> str:
        return "".join(
            placeholder if sq.digit is None else sq.digit.to_char() for sq in self._items
        )


class CandidateBoard(Board[Candidate]):
    """Working grid of per-cell candidate sets."""

    @classmethod
    def from_board(cls, board: SquareBoard) -> "CandidateBoard":
        return cls(
            (Candidate.new(sq) for sq in board.items()), board.block_size(), board.num_blocks()
        )

    def take_fixed_digit_at(self, pos: ItemPosition) -> Digit | None:
        return self.item_at(pos).take_fixed_digit()

    def item_at_mut(self, pos: ItemPosition) -> Candidate:
        return self.item_at(pos)

    def row_items_mut(self, row: int) -> Iterator[Candidate]:
        return self.row_items(row)

    def column_items_mut(self, col: int) -> Iterator[Candidate]:
        return self.column_items(col)

    def block_at_mut(self, pos: BlockPosition) -> BoardBlock[Candidate]:
        return self.block_at(pos)

    def count_digits(self) -> int:
        return sum(len(c) for c in self._items)

    def clone(self) -> "CandidateBoard":
        return CandidateBoard(
            (Candidate(c.digits.copy()) for c in self._items), self._block_size, self._num_blocks
        )


class DuplicationValidator:
    """Checks that a scope holds each fixed digit at most once."""

    def __init__(self, board: SquareBoard) -> None:
        self.board = board

    def validate(self, item_pos: ItemPosition, digit: Digit | None) -> None:
        self.validate_with_scope(Scope.row(item_pos.row), digit)
        self.validate_with_scope(Scope.column(item_pos.col), digit)
        self.validate_with_scope(Scope.block(self.board.block_of(item_pos)), digit)

    def validate_with_scope(self, scope: Scope, digit: Digit | None) -> None:
        if scope.kind is ScopeKind.ROW:
            squares: Iterable[Square] = self.board.row_items(scope.index)  # type: ignore[arg-type]
        elif scope.kind is ScopeKind.COLUMN:
            squares = self.board.column_items(scope.index)  # type: ignore[arg-type]
        else:
            squares = self.board.block_at(scope.index)  # type: ignore[arg-type]
        self._validate_with_iter(scope, digit, squares)

    @staticmethod
    def _validate_with_iter(scope: Scope, digit: Digit | None, squares: Iterable[Square]) -> None:
        validated = 0
        duplications: List[Digit] = []

        def _check(d: Digit) -> None:
            nonlocal validated
            mask = 1 << (d.get() - 1)
            if validated & mask:
                duplications.append(d)
            else:
                validated |= mask

        for sq in squares:
            if sq.digit is not None:
                _check(sq.digit)
        if digit is not None:
            _check(digit)

        if duplications:
            raise BoardError(scope, duplications)


__all__ = [
    "BlockPosition",
    "Board",
    "BoardBlock",
    "CandidateBoard",
    "DuplicationValidator",
    "ItemPosition",
    "Scope",
    "ScopeKind",
    "SquareBoard",
    "enumerate_table_positions",
]
