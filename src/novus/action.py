"""Deferred candidate mutations produced by filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .board import CandidateBoard
from .candidate import Candidate
from .digit import Digit, all_digits_iter
from .digit_set import DigitSet
from .positions import BlockPositions, ColumnPositions, RowPositions

ActionScope = Union[RowPositions, ColumnPositions, BlockPositions]


def _selected_cells(scope: ActionScope, candidates: CandidateBoard) -> Iterator[Candidate]:
    if isinstance(scope, RowPositions):
        return scope.columns.items_from_iter(candidates.row_items_mut(scope.row))
    if isinstance(scope, ColumnPositions):
        return scope.rows.items_from_iter(candidates.column_items_mut(scope.column))
    if isinstance(scope, BlockPositions):
        return scope.indexes.items_from_iter(candidates.block_at_mut(scope.block_at))
    raise TypeError(f"Unsupported action scope: {type(scope)!r}")


@dataclass(frozen=True)
class RetainAction:
    """Keep only ``digits`` in every cell selected by ``scope``."""

    digits: DigitSet
    scope: ActionScope

    @classmethod
    def with_digit(cls, digit: Digit, scope: ActionScope) -> "RetainAction":
        return cls(DigitSet([digit]), scope)

    def apply(self, candidates: CandidateBoard) -> bool:
        dropped = [d for d in all_digits_iter() if not self.digits.contains(d)]
        updated = False
        for cell in _selected_cells(self.scope, candidates):
            updated = cell.remove_iter(dropped) or updated
        return updated


@dataclass(frozen=True)
class RemoveAction:
    """Drop ``digit`` from every cell selected by ``scope``."""

    digit: Digit
    scope: ActionScope

    def apply(self, candidates: CandidateBoard) -> bool:
        updated = False
        for cell in _selected_cells(self.scope, candidates):
            updated = cell.remove(self.digit) or updated
        return updated


Action = Union[RetainAction, RemoveAction]

__all__ = [
    "Action",
    "ActionScope",
    "RemoveAction",
    "RetainAction",
]
