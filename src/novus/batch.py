"""Batch driver: solve every puzzle of a file and aggregate the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .errors import SolverError
from .loader import NamedPuzzle
from .report_schema import REPORT_TYPE, validate_report
from .settings import SolverSettings
from .solver import Solver

_LOGGER = logging.getLogger(__name__)

STATUS_SOLVED = "solved"
STATUS_FAILED = "failed"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class PuzzleResult:
    name: str
    status: str
    updates: int
    get_stuck: int
    back_tracked: int
    grid: str
    error: str | None = None
    techniques: Dict[str, int] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED

    def top_left_number(self) -> int:
        """The number formed by the first three digits of the top row."""

        return int(self.grid[:3])

    def summary_line(self) -> str:
        label = "Complete!" if self.solved else "Failure"
        return (
            f"{self.name}: {label} (with {self.updates} updates, "
            f"{self.get_stuck} got stuck, {self.back_tracked} backtrack)"
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "status": self.status,
            "updates": self.updates,
            "get_stuck": self.get_stuck,
            "back_tracked": self.back_tracked,
            "grid": self.grid,
        }
        if self.error is not None:
            payload["error"] = self.error
        if self.techniques:
            payload["techniques"] = dict(self.techniques)
        return payload


@dataclass
class BatchSummary:
    results: List[PuzzleResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def solved(self) -> int:
        return sum(1 for r in self.results if r.solved)

    @property
    def failed(self) -> int:
        return self.total - self.solved

    @property
    def checksum(self) -> int:
        """Sum of the top-left three-digit numbers of every solved puzzle."""

        return sum(r.top_left_number() for r in self.results if r.solved)

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "type": REPORT_TYPE,
            "total": self.total,
            "solved": self.solved,
            "failed": self.failed,
            "checksum": self.checksum,
            "puzzles": [r.to_payload() for r in self.results],
        }
        validate_report(payload)
        return payload


def solve_puzzle(puzzle: NamedPuzzle, settings: SolverSettings | None = None) -> PuzzleResult:
    solver = Solver(puzzle.board.clone(), settings=settings)
    error: str | None = None
    try:
        complete = solver.solve()
    except SolverError as exc:
        _LOGGER.warning("%s: %s", puzzle.name, exc)
        complete = False
        error = str(exc)

    if error is not None:
        status = STATUS_ERROR
    else:
        status = STATUS_SOLVED if complete else STATUS_FAILED

    stats = solver.statistics
    return PuzzleResult(
        name=puzzle.name,
        status=status,
        updates=solver.updates,
        get_stuck=stats.get_stuck,
        back_tracked=stats.back_tracked,
        grid=solver.board.to_string(),
        error=error,
        techniques=solver.trace.technique_counts(),
    )


def solve_batch(
    puzzles: Iterable[NamedPuzzle], settings: SolverSettings | None = None
) -> BatchSummary:
    settings = settings or SolverSettings.load()
    summary = BatchSummary()
    for puzzle in puzzles:
        result = solve_puzzle(puzzle, settings)
        _LOGGER.info(result.summary_line())
        summary.results.append(result)
    return summary


__all__ = [
    "BatchSummary",
    "PuzzleResult",
    "STATUS_ERROR",
    "STATUS_FAILED",
    "STATUS_SOLVED",
    "solve_batch",
    "solve_puzzle",
]
