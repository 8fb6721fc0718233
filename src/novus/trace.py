"""Per-update solve trace with JSON export."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Mapping, MutableSequence

from .board import CandidateBoard, SquareBoard

BRANCH = "Branch"
BACKTRACK = "Backtrack"
COMMIT = "Commit"


class TraceValidationError(ValueError):
    """Raised when a trace entry is malformed."""


def state_hash(board: SquareBoard, candidates: CandidateBoard) -> str:
    """Return a stable ``sha256-`` digest of both boards."""

    payload = {
        "grid": board.to_string(),
        "candidates": ["".join(str(d) for d in c.possible_digits()) for c in candidates.items()],
    }
    dumped = json.dumps(payload, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return "sha256-" + hashlib.sha256(dumped.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class SolveTraceEntry:
    """One solver update: the rule that fired and what it changed."""

    step: int
    technique_id: str
    placements: int
    candidates_removed: int
    state_hash_before: str = ""
    state_hash_after: str = ""
    note: str | None = None

    def __post_init__(self) -> None:
        if self.step < 1:
            raise TraceValidationError("step must be >= 1")
        if not self.technique_id:
            raise TraceValidationError("technique_id must be a non-empty string")
        if self.placements < 0:
            raise TraceValidationError("placements must be >= 0")
        if self.candidates_removed < 0:
            raise TraceValidationError("candidates_removed must be >= 0")

    def to_payload(self) -> dict:
        payload = {
            "step": int(self.step),
            "technique_id": str(self.technique_id),
            "placements": int(self.placements),
            "candidates_removed": int(self.candidates_removed),
            "state_hash_before": str(self.state_hash_before),
            "state_hash_after": str(self.state_hash_after),
        }
        if self.note is not None:
            payload["note"] = str(self.note)
        return payload


@dataclass
class SolveTrace:
    """Mutable accumulator; ``trace_level == "none"`` drops every entry."""

    trace_level: str = "none"
    entries: MutableSequence[SolveTraceEntry] = field(default_factory=list)

    @property
    def enabled(self) -> bool:
        return self.trace_level != "none"

    @property
    def with_hashes(self) -> bool:
        return self.trace_level == "full"

    def next_step(self) -> int:
        return self.entries[-1].step + 1 if self.entries else 1

    def append(self, entry: SolveTraceEntry | Mapping[str, object]) -> None:
        if not self.enabled:
            return
        if isinstance(entry, Mapping):
            entry = SolveTraceEntry(**entry)  # type: ignore[arg-type]
        if self.entries and entry.step <= self.entries[-1].step:
            raise TraceValidationError("trace steps must be strictly increasing")
        self.entries.append(entry)

    def technique_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for entry in self.entries:
            counts[entry.technique_id] = counts.get(entry.technique_id, 0) + 1
        return counts

    def to_json(self, *, indent: int | None = None) -> str:
        payload = [entry.to_payload() for entry in self.entries]
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), indent=indent)


__all__ = [
    "BACKTRACK",
    "BRANCH",
    "COMMIT",
    "SolveTrace",
    "SolveTraceEntry",
    "TraceValidationError",
    "state_hash",
]
