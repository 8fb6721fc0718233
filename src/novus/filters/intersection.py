"""Locked candidate filters (pointing and claiming)."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from ..action import ActionScope, RemoveAction
from ..board import BlockPosition, CandidateBoard, SquareBoard
from ..candidate import Candidate
from ..event import Event, EventQueue
from ..positions import BlockPositions, ColumnPositions, Positions, RowPositions
from .context import FilterContext

LOCKED_CANDIDATE_POINTING = "LockedCandidate(Pointing)"
LOCKED_CANDIDATE_CLAIMING = "LockedCandidate(Claiming)"


class LockedCandidate:
    def __init__(self, block_size: int, num_blocks: int) -> None:
        self.block_size = block_size
        self.num_blocks = num_blocks

    def _locked(self, positions: Positions) -> bool:
        return 2 <= positions.num_set() <= self.block_size

    def positions_exclude_block(self, block_offset: int) -> Positions:
        """Offsets of a whole row/column minus the ones inside one block."""

        return Positions.with_offset(block_offset * self.block_size, self.block_size).invert(
            self.block_size * self.num_blocks
        )

    def scan_pointing(
        self,
        context: FilterContext,
        event_queue: EventQueue,
        block_cells: Iterable[Candidate],
        line_items: Callable[[int], Iterator[Candidate]],
        scope_fn: Callable[[int], ActionScope],
    ) -> None:
        context.collect_digit_positions_matches(block_cells, lambda _, ps: self._locked(ps))

        for digit, positions in context.digit_positions.items():
            for offset in range(self.block_size):
                num_digits = sum(1 for c in line_items(offset) if c.contains(digit))
                if num_digits == positions.num_set():
                    event_queue.push_back(
                        Event(RemoveAction(digit, scope_fn(offset)), LOCKED_CANDIDATE_POINTING)
                    )

    def scan_claiming(
        self,
        context: FilterContext,
        event_queue: EventQueue,
        line_cells: Iterable[Candidate],
        scope_fn: Callable[[int], ActionScope],
    ) -> None:
        context.collect_digit_positions_matches(line_cells, lambda _, ps: self._locked(ps))

        for digit, positions in context.digit_positions.items():
            for offset in range(self.num_blocks):
                segment = Positions.with_offset(offset * self.block_size, self.block_size)
                if positions.belongs_to(segment):
                    event_queue.push_back(
                        Event(RemoveAction(digit, scope_fn(offset)), LOCKED_CANDIDATE_CLAIMING)
                    )


def locked_candidate_pointing(
    board: SquareBoard,
    candidates: CandidateBoard,
    context: FilterContext,
    event_queue: EventQueue,
) -> None:
    """A digit confined to one row (or column) of a block leaves the rest of that line."""

    block_size = candidates.block_size()
    locked = LockedCandidate(block_size, candidates.num_blocks())

    for block_pos in candidates.block_positions():
        block = candidates.block_at(block_pos)

        def row_scope(block_row: int, block_pos: BlockPosition = block_pos) -> ActionScope:
            row = block_pos.row * block_size + block_row
            return RowPositions(row, locked.positions_exclude_block(block_pos.col))

        locked.scan_pointing(context, event_queue, block, block.row_items, row_scope)

        def column_scope(block_col: int, block_pos: BlockPosition = block_pos) -> ActionScope:
            col = block_pos.col * block_size + block_col
            return ColumnPositions(col, locked.positions_exclude_block(block_pos.row))

        locked.scan_pointing(context, event_queue, block, block.column_items, column_scope)


def locked_candidate_claiming(
    board: SquareBoard,
    candidates: CandidateBoard,
    context: FilterContext,
    event_queue: EventQueue,
) -> None:
    """A digit confined to one block of a row (or column) leaves the rest of that block."""

    block_size = candidates.block_size()
    block_len = len(candidates.block_item_indexes())
    locked = LockedCandidate(block_size, candidates.num_blocks())

    for row in candidates.each_rows():

        def row_block_scope(block_col: int, row: int = row) -> ActionScope:
            block_at = BlockPosition(row // block_size, block_col)
            inside = Positions.with_offset((row % block_size) * block_size, block_size)
            return BlockPositions(block_at, inside.invert(block_len))

        locked.scan_claiming(context, event_queue, candidates.row_items(row), row_block_scope)

    for col in candidates.each_columns():

        def column_block_scope(block_row: int, col: int = col) -> ActionScope:
            block_at = BlockPosition(block_row, col // block_size)
            inside = Positions.with_positions(
                candidates.block_item_indexes()[col % block_size :: block_size]
            )
            return BlockPositions(block_at, inside.invert(block_len))

        locked.scan_claiming(
            context, event_queue, candidates.column_items(col), column_block_scope
        )


__all__ = [
    "LOCKED_CANDIDATE_CLAIMING",
    "LOCKED_CANDIDATE_POINTING",
    "LockedCandidate",
    "locked_candidate_claiming",
    "locked_candidate_pointing",
]
