"""Deduction rules ("filters") and their fixed dispatch table.

Every filter is a pure function of ``(board, candidates, context, queue)``:
it scans rows, columns and blocks and only pushes events onto the queue.
The solver drains the queue afterwards, so scanning never observes a
half-applied mutation.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, Tuple

from ..board import CandidateBoard, SquareBoard
from ..event import EventQueue
from .context import DigitPredicate, FilterContext
from .hidden import hidden_pair, hidden_quad, hidden_triple, search_hidden_digits
from .intersection import locked_candidate_claiming, locked_candidate_pointing
from .scopes import scan_all, scan_blocks, scan_columns, scan_rows
from .single import naked_single, single_candidate

FilterFn = Callable[[SquareBoard, CandidateBoard, FilterContext, EventQueue], None]


class FilterKind(str, Enum):
    """Supported deduction rules, cheapest first."""

    NAKED_SINGLE = "NakedSingle"
    SINGLE_CANDIDATE = "SingleCandidate"
    LOCKED_CANDIDATE_POINTING = "LockedCandidate(Pointing)"
    LOCKED_CANDIDATE_CLAIMING = "LockedCandidate(Claiming)"
    HIDDEN_PAIR = "HiddenPair"
    HIDDEN_TRIPLE = "HiddenTriple"
    HIDDEN_QUAD = "HiddenQuad"

    @classmethod
    def from_value(cls, value: str) -> "FilterKind":
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported filter: {value!r}") from exc


_FILTER_TABLE: Dict[FilterKind, FilterFn] = {
    FilterKind.NAKED_SINGLE: naked_single,
    FilterKind.SINGLE_CANDIDATE: single_candidate,
    FilterKind.LOCKED_CANDIDATE_POINTING: locked_candidate_pointing,
    FilterKind.LOCKED_CANDIDATE_CLAIMING: locked_candidate_claiming,
    FilterKind.HIDDEN_PAIR: hidden_pair,
    FilterKind.HIDDEN_TRIPLE: hidden_triple,
    FilterKind.HIDDEN_QUAD: hidden_quad,
}

DEFAULT_FILTER_ORDER: Tuple[FilterKind, ...] = tuple(FilterKind)


def run_filter(
    kind: FilterKind,
    board: SquareBoard,
    candidates: CandidateBoard,
    context: FilterContext,
    event_queue: EventQueue,
) -> None:
    _FILTER_TABLE[kind](board, candidates, context, event_queue)


def resolve_filters(names: Iterable[str] | None) -> Tuple[FilterKind, ...]:
    """Map configured filter names onto kinds, keeping their order."""

    if names is None:
        return DEFAULT_FILTER_ORDER
    kinds = tuple(FilterKind.from_value(str(name)) for name in names)
    if not kinds:
        raise ValueError("At least one filter must be configured")
    if len(set(kinds)) != len(kinds):
        raise ValueError("Filters must not be listed twice")
    return kinds


__all__ = [
    "DEFAULT_FILTER_ORDER",
    "DigitPredicate",
    "FilterContext",
    "FilterFn",
    "FilterKind",
    "resolve_filters",
    "run_filter",
    "scan_all",
    "scan_blocks",
    "scan_columns",
    "scan_rows",
    "search_hidden_digits",
]
