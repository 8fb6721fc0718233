"""Novus: constraint-propagation Sudoku engine with speculative backtracking."""

from __future__ import annotations

from .board import (
    BlockPosition,
    Board,
    BoardBlock,
    CandidateBoard,
    ItemPosition,
    Scope,
    ScopeKind,
    SquareBoard,
)
from .candidate import Candidate
from .digit import Digit
from .digit_set import DigitSet
from .errors import BoardError, InvalidDigit, MalformedGridError, SolverError
from .filters import DEFAULT_FILTER_ORDER, FilterContext, FilterKind
from .flags import Flags32
from .loader import BoardLoader, NamedPuzzle, load_batch
from .positions import BlockPositions, ColumnPositions, Positions, RowPositions
from .settings import SolverSettings
from .solver import Solver, SolverPhase, Statistics
from .square import Square
from .state_capsule import StateCapsule
from .trace import SolveTrace, SolveTraceEntry, TraceValidationError

__version__ = "1.0.0"

__all__ = [
    "BlockPosition",
    "BlockPositions",
    "Board",
    "BoardBlock",
    "BoardError",
    "BoardLoader",
    "Candidate",
    "CandidateBoard",
    "ColumnPositions",
    "DEFAULT_FILTER_ORDER",
    "Digit",
    "DigitSet",
    "FilterContext",
    "FilterKind",
    "Flags32",
    "InvalidDigit",
    "ItemPosition",
    "MalformedGridError",
    "NamedPuzzle",
    "Positions",
    "RowPositions",
    "Scope",
    "ScopeKind",
    "SolveTrace",
    "SolveTraceEntry",
    "Solver",
    "SolverError",
    "SolverPhase",
    "SolverSettings",
    "Square",
    "SquareBoard",
    "StateCapsule",
    "Statistics",
    "TraceValidationError",
    "load_batch",
]
