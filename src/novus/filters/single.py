"""Naked single and hidden single ("single candidate") filters."""

from __future__ import annotations

from typing import Iterable

from ..action import RemoveAction, RetainAction
from ..board import CandidateBoard, SquareBoard
from ..candidate import Candidate
from ..event import Event, EventQueue
from ..positions import Positions
from ..square import Square
from .context import FilterContext
from .scopes import ScopeFactory, scan_all

NAKED_SINGLE = "NakedSingle"
SINGLE_CANDIDATE = "SingleCandidate"


def naked_single(
    board: SquareBoard,
    candidates: CandidateBoard,
    context: FilterContext,
    event_queue: EventQueue,
) -> None:
    """Remove every fixed digit from the open cells of its row, column and block."""

    def visit(squares: Iterable[Square], scope_fn: ScopeFactory) -> None:
        context.digits_in_use.clear()
        open_cells = Positions()
        for offset, sq in enumerate(squares):
            if sq.digit is None:
                open_cells.set(offset)
            else:
                context.digits_in_use.set(sq.digit)

        if context.digits_in_use.is_empty() or not open_cells.num_set():
            return
        scope = scope_fn(open_cells)
        for d in context.digits_in_use:
            event_queue.push_back(Event(RemoveAction(d, scope), NAKED_SINGLE))

    scan_all(board, visit)


def single_candidate(
    board: SquareBoard,
    candidates: CandidateBoard,
    context: FilterContext,
    event_queue: EventQueue,
) -> None:
    """A digit left at exactly one offset of a scope is forced there."""

    def visit(cells: Iterable[Candidate], scope_fn: ScopeFactory) -> None:
        context.collect_digit_positions_matches(cells, lambda _, ps: ps.num_set() == 1)
        for digit, positions in context.digit_positions.items():
            action = RetainAction.with_digit(digit, scope_fn(positions))
            event_queue.push_back(Event(action, SINGLE_CANDIDATE))

    scan_all(candidates, visit)


__all__ = ["NAKED_SINGLE", "SINGLE_CANDIDATE", "naked_single", "single_candidate"]
