"""Shared error types for the Novus Sudoku engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .board import Scope
    from .digit import Digit


class InvalidDigit(ValueError):
    """Raised when a character or integer cannot be converted to a digit."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Cannot convert {value!r} to Digit")


class MalformedGridError(ValueError):
    """Raised when puzzle text does not describe a block-square grid."""


class BoardError(Exception):
    """Raised when fixing a digit would duplicate it within a scope."""

    def __init__(self, scope: "Scope", digits: Sequence["Digit"]) -> None:
        self.scope = scope
        self.digits: Tuple["Digit", ...] = tuple(digits)
        rendered = ", ".join(str(d) for d in self.digits)
        super().__init__(f"duplication error. digit:[{rendered}], scope:{scope}")


class SolverError(RuntimeError):
    """Raised by :meth:`novus.solver.Solver.update` when no branch is left to retry."""

    def __init__(self, source: BoardError) -> None:
        self.source = source
        super().__init__(f"board error: {source}")


__all__ = ["BoardError", "InvalidDigit", "MalformedGridError", "SolverError"]
