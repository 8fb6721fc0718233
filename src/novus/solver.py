"""Solve loop: filter to fixpoint, commit collapsed cells, branch when stuck.

Each :meth:`Solver.update` call performs one step of the state machine::

    Scanning -> Committing -> {Scanning | Stuck | Backtracking | Failed} -> ... -> Solved

Filters run in priority order and the first one whose events change a
candidate ends the scan.  Collapsed candidates are then harvested into the
authoritative board.  When no filter makes progress the solver snapshots the
state and queues one speculative branch per candidate digit of every cell
whose candidate count equals ``get_stuck + 1``; pending branches are retried
first-in first-out.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Deque, List, Sequence, Tuple

from .board import CandidateBoard, ItemPosition, SquareBoard
from .digit import Digit
from .errors import BoardError, SolverError
from .event import EventQueue
from .filters import FilterContext, FilterKind, run_filter
from .settings import SolverSettings
from .state_capsule import StateCapsule
from .trace import BACKTRACK, BRANCH, COMMIT, SolveTrace, SolveTraceEntry, state_hash

_LOGGER = logging.getLogger(__name__)


class SolverPhase(str, Enum):
    SCANNING = "scanning"
    COMMITTING = "committing"
    STUCK = "stuck"
    BACKTRACKING = "backtracking"
    SOLVED = "solved"
    FAILED = "failed"


@dataclass
class Statistics:
    get_stuck: int = 0
    back_tracked: int = 0


class Solver:
    """Constraint-propagation solver with speculative backtracking."""

    def __init__(
        self,
        board: SquareBoard,
        *,
        settings: SolverSettings | None = None,
        filters: Sequence[FilterKind] | None = None,
    ) -> None:
        self.settings = settings or SolverSettings.load()
        self._filters: Tuple[FilterKind, ...] = (
            tuple(filters) if filters is not None else self.settings.filters
        )
        self._context = FilterContext()
        self._event_queue = EventQueue()
        self._state = StateCapsule(board, CandidateBoard.from_board(board))
        self._possible_states: Deque[StateCapsule] = deque()
        self._stuck_state: StateCapsule | None = None
        self._statistics = Statistics()
        self._phase = SolverPhase.SCANNING
        self._updates = 0
        self.trace = SolveTrace(trace_level=self.settings.trace_level)

    # Public accessors -------------------------------------------------

    @property
    def board(self) -> SquareBoard:
        return self._state.board

    @property
    def candidates(self) -> CandidateBoard:
        return self._state.candidates

    @property
    def statistics(self) -> Statistics:
        return replace(self._statistics)

    @property
    def phase(self) -> SolverPhase:
        return self._phase

    @property
    def filters(self) -> Tuple[FilterKind, ...]:
        return self._filters

    @property
    def stuck_state(self) -> StateCapsule | None:
        return self._stuck_state

    @property
    def pending_states(self) -> int:
        return len(self._possible_states)

    @property
    def updates(self) -> int:
        return self._updates

    # Solve loop -------------------------------------------------------

    def update(self) -> bool:
        """Run one step and report whether anything observable changed.

        Returns ``False`` once the board is complete or the search is
        exhausted.  Raises :class:`SolverError` when a commit duplicates a
        digit and no speculative branch is left to retry.
        """

        if self._phase in (SolverPhase.SOLVED, SolverPhase.FAILED):
            return False

        self._updates += 1
        hash_before = self._hash()

        # A branch may start with a collapsed cell; fix it before scanning.
        if self._phase is SolverPhase.BACKTRACKING:
            self._phase = SolverPhase.COMMITTING
            placements = self._commit()
            if placements is None:
                return True
            if placements:
                self._record(COMMIT, placements, 0, hash_before, note=self._state.note or None)
                self._finish_commit()
                return True

        self._phase = SolverPhase.SCANNING
        removed_before = self.candidates.count_digits()
        fired = self._scan()

        if fired is not None:
            self._phase = SolverPhase.COMMITTING
            removed = removed_before - self.candidates.count_digits()
            placements = self._commit()
            if placements is None:
                return True
            self._record(fired.value, placements, removed, hash_before)
            self._finish_commit()
            return True

        if self.board.is_complete():
            self._phase = SolverPhase.SOLVED
            return False

        if self._possible_states:
            self._backtrack()
            return True

        if self._is_dead():
            self._fail("dead end with no branch left")
            return False

        return self._get_stuck(hash_before)

    def solve(self, max_updates: int | None = None) -> bool:
        """Loop on :meth:`update` and return whether the board is complete."""

        limit = max_updates if max_updates is not None else self.settings.max_updates
        steps = 0
        while steps < limit and self.update():
            steps += 1
        if steps >= limit and not self.board.is_complete():
            _LOGGER.warning("update limit of %d reached before completion", limit)
        return self.board.is_complete()

    # Internal helpers -------------------------------------------------

    def _scan(self) -> FilterKind | None:
        for kind in self._filters:
            run_filter(kind, self.board, self.candidates, self._context, self._event_queue)
            if self._evaluate_events():
                return kind
        return None

    def _evaluate_events(self) -> bool:
        evaluated = False
        for event in self._event_queue.drain():
            evaluated = event.evaluate(self.candidates) or evaluated
        return evaluated

    def _commit(self) -> int | None:
        """Harvest collapsed cells; ``None`` means the state was discarded."""

        try:
            return self._update_board()
        except BoardError as err:
            if not self._possible_states:
                self._phase = SolverPhase.FAILED
                _LOGGER.warning("commit failed with no branch left: %s", err)
                raise SolverError(err) from err
            _LOGGER.debug("commit failed (%s); discarding branch", err)
            self._backtrack()
            return None

    def _finish_commit(self) -> None:
        self._phase = SolverPhase.SOLVED if self.board.is_complete() else SolverPhase.SCANNING

    def _is_dead(self) -> bool:
        """An open square without candidates can never be fixed."""

        return any(
            not sq.is_fixed() and not c.has_candidate()
            for sq, c in zip(self.board.items(), self.candidates.items())
        )

    def _fail(self, reason: str) -> None:
        self._phase = SolverPhase.FAILED
        _LOGGER.warning(
            "%s after %d stalls and %d backtracks",
            reason,
            self._statistics.get_stuck,
            self._statistics.back_tracked,
        )

    def _update_board(self) -> int:
        placements = 0
        for pos in self.candidates.item_positions():
            digit = self.candidates.take_fixed_digit_at(pos)
            if digit is not None:
                self.board.fix_digit_at(pos, digit)
                placements += 1
        return placements

    def _backtrack(self) -> None:
        hash_before = self._hash()
        self._phase = SolverPhase.BACKTRACKING
        self._statistics.back_tracked += 1
        self._state = self._possible_states.popleft()
        _LOGGER.debug(
            "backtracked to %s (depth=%d, pending=%d)",
            self._state.note or "root",
            self._state.depth,
            len(self._possible_states),
        )
        self._record(BACKTRACK, 0, 0, hash_before, note=self._state.note or None)

    def _get_stuck(self, hash_before: str) -> bool:
        self._statistics.get_stuck += 1
        threshold = self._statistics.get_stuck + 1
        self._stuck_state = StateCapsule.snapshot(
            self.board, self.candidates, depth=self._state.depth, note=self._state.note
        )

        branches = self._branches(threshold)
        if not branches and threshold > self.board.width():
            self._fail("search exhausted")
            return False

        self._possible_states.extend(branches)
        self._phase = SolverPhase.STUCK
        _LOGGER.debug(
            "stuck #%d: %d branches on cells with %d candidates",
            self._statistics.get_stuck,
            len(branches),
            threshold,
        )
        note = f"threshold={threshold} branches={len(branches)}"
        self._record(BRANCH, 0, 0, hash_before, note=note)
        return True

    def _branches(self, threshold: int) -> List[StateCapsule]:
        branches: List[StateCapsule] = []
        for pos in self.candidates.item_positions():
            cell = self.candidates.item_at(pos)
            if len(cell) != threshold:
                continue
            for d in cell.possible_digits():
                branches.append(self._branch_without(pos, d))
        return branches

    def _branch_without(self, pos: ItemPosition, digit: Digit) -> StateCapsule:
        next_candidates = self.candidates.clone()
        next_candidates.item_at_mut(pos).remove(digit)
        return StateCapsule(
            self.board.clone(),
            next_candidates,
            depth=self._state.depth + 1,
            note=f"{pos} without {digit}",
        )

    def _hash(self) -> str:
        if not self.trace.with_hashes:
            return ""
        return state_hash(self.board, self.candidates)

    def _record(
        self,
        technique_id: str,
        placements: int,
        candidates_removed: int,
        hash_before: str,
        *,
        note: str | None = None,
    ) -> None:
        if not self.trace.enabled:
            return
        self.trace.append(
            SolveTraceEntry(
                step=self.trace.next_step(),
                technique_id=technique_id,
                placements=placements,
                candidates_removed=max(candidates_removed, 0),
                state_hash_before=hash_before,
                state_hash_after=self._hash(),
                note=note,
            )
        )


__all__ = ["Solver", "SolverPhase", "Statistics"]
