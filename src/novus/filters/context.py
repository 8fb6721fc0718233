"""Scratch state shared by every filter scan."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from ..candidate import Candidate
from ..digit import Digit, all_digits_iter
from ..digit_set import DigitSet
from ..positions import Positions

DigitPredicate = Callable[[Digit, Positions], bool]


class FilterContext:
    """Reusable digit -> positions map, rebuilt for every scanned scope."""

    def __init__(self) -> None:
        self.digits_in_use = DigitSet()
        self.digit_positions: Dict[Digit, Positions] = {}

    def collect_digit_positions(self, cells: Iterable[Candidate]) -> None:
        """Record, for each digit, the offsets of ``cells`` that still allow it.

        Digits absent from every cell are left out of the map.  Keys are
        inserted in ascending digit order.
        """

        self.digit_positions.clear()
        scope: List[Candidate] = list(cells)
        for d in all_digits_iter():
            positions = Positions()
            for offset, cell in enumerate(scope):
                if cell.contains(d):
                    positions.set(offset)
            if positions.num_set():
                self.digit_positions[d] = positions

    def collect_digit_positions_matches(
        self, cells: Iterable[Candidate], predicate: DigitPredicate
    ) -> None:
        self.collect_digit_positions(cells)
        for d in [d for d, ps in self.digit_positions.items() if not predicate(d, ps)]:
            del self.digit_positions[d]


__all__ = ["DigitPredicate", "FilterContext"]
