"""Human-readable renderings of square and candidate boards.

The output is meant for inspection only and is not a stable format.
"""

from __future__ import annotations

from typing import List

from .board import CandidateBoard, ItemPosition, SquareBoard
from .digit import Digit


def render_board(board: SquareBoard) -> str:
    block_size = board.block_size()

    def separator() -> str:
        parts = []
        for col in board.each_columns():
            if col % block_size == 0:
                parts.append("+-")
            parts.append("--")
        return "".join(parts) + "+"

    lines: List[str] = []
    for row in board.each_rows():
        if row % block_size == 0:
            lines.append(separator())
        cells = []
        for col, sq in enumerate(board.row_items(row)):
            if col % block_size == 0:
                cells.append("| ")
            cells.append(f"{str(sq):>2}")
        lines.append("".join(cells) + "|")
    lines.append(separator())
    return "\n".join(lines)


def render_candidates(candidates: CandidateBoard) -> str:
    """Draw each cell as a block-shaped grid of its remaining digits.

    Digit ``d`` always occupies slot ``d - 1`` of the cell, read row-major.
    """

    block_size = candidates.block_size()
    separator = ("+-" + "--" * block_size) * candidates.width() + "+"

    lines: List[str] = []
    for row in candidates.each_rows():
        lines.append(separator)
        for block_row in candidates.each_block_rows():
            cells = []
            for col in candidates.each_columns():
                cell = candidates.item_at(ItemPosition(row, col))
                slots = []
                for block_col in candidates.each_block_columns():
                    value = block_row * block_size + block_col + 1
                    if value <= candidates.width() and cell.contains(Digit(value)):
                        slots.append(f"{value:2}")
                    else:
                        slots.append("  ")
                cells.append("|" + "".join(slots) + " ")
            lines.append("".join(cells) + "|")
    lines.append(separator)
    return "\n".join(lines)


__all__ = ["render_board", "render_candidates"]
