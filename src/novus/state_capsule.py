"""Value snapshot of the solver state used for branching."""

from __future__ import annotations

from dataclasses import dataclass

from .board import CandidateBoard, SquareBoard


@dataclass(frozen=True)
class StateCapsule:
    """Pair of boards plus the branch that produced them.

    ``depth`` counts the speculative eliminations applied since the initial
    puzzle; ``note`` describes the most recent one (empty for the root).
    Capsules own private copies of both boards, so a queued branch is never
    affected by work done on the current state.
    """

    board: SquareBoard
    candidates: CandidateBoard
    depth: int = 0
    note: str = ""

    @classmethod
    def snapshot(
        cls, board: SquareBoard, candidates: CandidateBoard, *, depth: int = 0, note: str = ""
    ) -> "StateCapsule":
        return cls(board.clone(), candidates.clone(), depth, note)


__all__ = ["StateCapsule"]
