"""Text puzzle loader.

Each puzzle is ``N`` lines of ``N`` characters.  Characters ``'1'..'9'`` are
givens; anything else (``'0'``, ``'.'``, ``'-'``...) marks an unknown cell.
Shape problems raise :class:`MalformedGridError` before any solving starts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from .board import SquareBoard
from .digit import MAX_DIGIT
from .errors import MalformedGridError
from .square import Square

GRID_HEADER = "Grid"


@dataclass(frozen=True)
class NamedPuzzle:
    name: str
    board: SquareBoard


class BoardLoader:
    @staticmethod
    def from_lines(lines: Iterable[str], *, strict: bool = True) -> SquareBoard:
        rows = [line.rstrip("\r\n") for line in lines]
        height = len(rows)
        width = height
        if height == 0:
            raise MalformedGridError("wrong input. the grid is empty")

        block_size = math.isqrt(height)
        if block_size * block_size != height:
            raise MalformedGridError(
                f"wrong input. width={width}, height={height}, block_size={block_size}"
            )
        if height != MAX_DIGIT:
            raise MalformedGridError(
                f"wrong input. only {MAX_DIGIT}x{MAX_DIGIT} grids are supported, "
                f"found {height} lines"
            )

        items: List[Square] = []
        for row in rows:
            if len(row) != width:
                raise MalformedGridError(
                    f"Wrong line, must contain {width} chars, found {len(row)} chars on '{row}'"
                )
            items.extend(Square.from_char(c) for c in row)

        board = SquareBoard(items, block_size, height // block_size)
        if strict:
            board.validate()
        return board

    @staticmethod
    def from_string(text: str, *, strict: bool = True) -> SquareBoard:
        """Load a puzzle written as one string of ``N * N`` characters."""

        compact = "".join(text.split())
        side = math.isqrt(len(compact))
        if side == 0 or side * side != len(compact):
            raise MalformedGridError(
                f"wrong input. {len(compact)} characters do not form a square grid"
            )
        rows = [compact[i : i + side] for i in range(0, len(compact), side)]
        return BoardLoader.from_lines(rows, strict=strict)


def load_batch(text: str, *, strict: bool = True) -> List[NamedPuzzle]:
    """Split ``Grid NN`` separated text into named puzzles.

    Files without headers are chunked every nine lines and numbered from 1.
    """

    puzzles: List[NamedPuzzle] = []
    name: str | None = None
    chunk: List[str] = []

    def _flush() -> None:
        if not chunk:
            return
        label = name or f"{GRID_HEADER} {len(puzzles) + 1:02d}"
        puzzles.append(NamedPuzzle(label, BoardLoader.from_lines(chunk, strict=strict)))
        chunk.clear()

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith(GRID_HEADER):
            _flush()
            name = line
            continue
        chunk.append(line)
        if name is None and len(chunk) == MAX_DIGIT:
            _flush()
    _flush()
    return puzzles


__all__ = ["BoardLoader", "GRID_HEADER", "NamedPuzzle", "load_batch"]
