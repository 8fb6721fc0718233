"""Hidden pair, triple and quad filters."""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Iterable

from ..action import ActionScope, RetainAction
from ..board import CandidateBoard, SquareBoard
from ..candidate import Candidate
from ..digit_set import DigitSet
from ..event import Event, EventQueue
from ..positions import Positions
from .context import FilterContext
from .scopes import ScopeFactory, scan_all

HIDDEN_NAMES = {2: "HiddenPair", 3: "HiddenTriple", 4: "HiddenQuad"}


def search_hidden_digits(
    context: FilterContext,
    event_queue: EventQueue,
    num_digits: int,
    scope_len: int,
    cells: Iterable[Candidate],
    scope_fn: Callable[[Positions], ActionScope],
) -> None:
    """Emit a retain event for every ``num_digits`` digits sharing ``num_digits`` cells.

    Each digit of the group must occupy exactly the same offsets; the other
    digits of those cells are then eliminated.
    """

    context.collect_digit_positions_matches(cells, lambda _, ps: ps.num_set() >= 2)
    digit_positions = context.digit_positions
    name = HIDDEN_NAMES.get(num_digits, f"Hidden{num_digits}")

    for digits in combinations(digit_positions, num_digits):
        positions = Positions().invert(scope_len)
        for d in digits:
            positions = positions.and_(digit_positions[d])
        if positions.num_set() != num_digits:
            continue
        if not all(digit_positions[d] == positions for d in digits):
            continue
        action = RetainAction(DigitSet(digits), scope_fn(positions))
        event_queue.push_back(Event(action, name))


def _hidden(num_digits: int):
    def scan(
        board: SquareBoard,
        candidates: CandidateBoard,
        context: FilterContext,
        event_queue: EventQueue,
    ) -> None:
        scope_len = candidates.width()

        def visit(cells: Iterable[Candidate], scope_fn: ScopeFactory) -> None:
            search_hidden_digits(context, event_queue, num_digits, scope_len, cells, scope_fn)

        scan_all(candidates, visit)

    scan.__name__ = f"hidden_{HIDDEN_NAMES[num_digits][6:].lower()}"
    scan.__doc__ = f"{HIDDEN_NAMES[num_digits]} filter over rows, columns and blocks."
    return scan


hidden_pair = _hidden(2)
hidden_triple = _hidden(3)
hidden_quad = _hidden(4)

__all__ = ["HIDDEN_NAMES", "hidden_pair", "hidden_quad", "hidden_triple", "search_hidden_digits"]
