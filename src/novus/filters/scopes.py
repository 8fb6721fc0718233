"""Row, column and block walks shared by the per-scope filters.

A visitor receives the cells of one scope, in scope order, and a factory
turning a :class:`~novus.positions.Positions` mask over those cells into an
action scope addressing the same cells on the board.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Iterable, TypeVar

from ..action import ActionScope
from ..board import Board
from ..positions import BlockPositions, ColumnPositions, Positions, RowPositions

T = TypeVar("T")

ScopeFactory = Callable[[Positions], ActionScope]
ScopeVisitor = Callable[[Iterable[T], ScopeFactory], None]


def scan_rows(board: Board[T], visit: ScopeVisitor) -> None:
    for row in board.each_rows():
        visit(board.row_items(row), partial(RowPositions, row))


def scan_columns(board: Board[T], visit: ScopeVisitor) -> None:
    for col in board.each_columns():
        visit(board.column_items(col), partial(ColumnPositions, col))


def scan_blocks(board: Board[T], visit: ScopeVisitor) -> None:
    for block_pos in board.block_positions():
        visit(board.block_at(block_pos), partial(BlockPositions, block_pos))


def scan_all(board: Board[T], visit: ScopeVisitor) -> None:
    scan_rows(board, visit)
    scan_columns(board, visit)
    scan_blocks(board, visit)


__all__ = ["ScopeFactory", "ScopeVisitor", "scan_all", "scan_blocks", "scan_columns", "scan_rows"]
