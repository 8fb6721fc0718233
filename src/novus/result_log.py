"""Append-only JSONL store for batch results.

Records land in ``<base_dir>/<YYYYMMDD>/solve_NN.jsonl``; a file that has
grown past ``max_bytes`` is left alone and the next free counter is used.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

from .batch import PuzzleResult

DEFAULT_MAX_BYTES = 100 * 1024 * 1024


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResultLog:
    """Thread-safe writer that rotates by day and by file size."""

    def __init__(self, base_dir: str | Path, *, max_bytes: int | None = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or DEFAULT_MAX_BYTES
        self._lock = threading.Lock()
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """File that received the latest record, if any."""

        return self._path

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self, now: datetime) -> Path:
        day_dir = self.base_dir / now.strftime("%Y%m%d")
        day_dir.mkdir(parents=True, exist_ok=True)
        if self._path is not None and self._path.parent == day_dir and self._has_room(self._path):
            return self._path

        counter = 0
        while not self._has_room(day_dir / f"solve_{counter:02d}.jsonl"):
            counter += 1
        return day_dir / f"solve_{counter:02d}.jsonl"

    def append(self, record: Mapping[str, Any]) -> Path:
        """Write one record, stamping ``ts`` unless the caller set it."""

        now = _utc_now()
        payload = {"ts": now.isoformat(timespec="milliseconds"), **record}
        line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
        with self._lock:
            self._path = self._target(now)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return self._path

    def write_results(self, source: str, results: Iterable[PuzzleResult]) -> int:
        written = 0
        for result in results:
            self.append({"source": source, **result.to_payload()})
            written += 1
        return written


__all__ = ["DEFAULT_MAX_BYTES", "ResultLog"]
