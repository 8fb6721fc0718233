"""Solver and logging settings resolved from config.toml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Tuple

from project_config import get_section

from .filters import DEFAULT_FILTER_ORDER, FilterKind, resolve_filters

TRACE_LEVELS = ("none", "steps", "full")
DEFAULT_MAX_UPDATES = 10_000
DEFAULT_LOG_MAX_BYTES = 100 * 1024 * 1024


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _coerce_positive_int(value: Any) -> int | None:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _coerce_trace_level(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    normalised = value.strip().lower()
    return normalised if normalised in TRACE_LEVELS else None


@dataclass(frozen=True)
class SolverSettings:
    filters: Tuple[FilterKind, ...] = DEFAULT_FILTER_ORDER
    max_updates: int = DEFAULT_MAX_UPDATES
    trace_level: str = "none"

    def __post_init__(self) -> None:
        if self.trace_level not in TRACE_LEVELS:
            raise ValueError(f"Unsupported trace level: {self.trace_level!r}")
        if self.max_updates <= 0:
            raise ValueError("max_updates must be positive")

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "SolverSettings":
        """Merge the ``[solver]`` section with ``SUDOKU_*`` overrides."""

        section = _as_dict(get_section("solver", {}))
        env = os.environ if env is None else env

        filters = resolve_filters(section.get("filters"))

        max_updates = _coerce_positive_int(section.get("max_updates")) or DEFAULT_MAX_UPDATES
        override = _coerce_positive_int(env.get("SUDOKU_MAX_UPDATES"))
        if override is not None:
            max_updates = override

        trace_level = _coerce_trace_level(section.get("trace_level")) or "none"
        trace_override = _coerce_trace_level(env.get("SUDOKU_TRACE_LEVEL"))
        if trace_override is not None:
            trace_level = trace_override

        return cls(filters=filters, max_updates=max_updates, trace_level=trace_level)


@dataclass(frozen=True)
class LoaderSettings:
    placeholder: str = "0"
    strict: bool = True

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "LoaderSettings":
        section = _as_dict(get_section("loader", {}))
        env = os.environ if env is None else env

        placeholder = str(section.get("placeholder", "0"))[:1] or "0"
        strict = _coerce_bool(section.get("strict"))
        strict_override = _coerce_bool(env.get("SUDOKU_LOADER_STRICT"))
        if strict_override is not None:
            strict = strict_override
        return cls(placeholder=placeholder, strict=True if strict is None else strict)


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "WARNING"
    log_dir: Path = Path("logs/solve")
    max_bytes: int = DEFAULT_LOG_MAX_BYTES

    @classmethod
    def load(cls, env: Mapping[str, str] | None = None) -> "LoggingSettings":
        section = _as_dict(get_section("logging", {}))
        env = os.environ if env is None else env

        level = str(env.get("SUDOKU_LOG_LEVEL") or section.get("level") or "WARNING").upper()
        log_dir = Path(str(env.get("SUDOKU_LOG_DIR") or section.get("log_dir") or "logs/solve"))
        max_bytes = _coerce_positive_int(section.get("max_bytes")) or DEFAULT_LOG_MAX_BYTES
        return cls(level=level, log_dir=log_dir, max_bytes=max_bytes)


__all__ = ["LoaderSettings", "LoggingSettings", "SolverSettings", "TRACE_LEVELS"]
