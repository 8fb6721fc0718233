from __future__ import annotations

import pytest

from novus.board import CandidateBoard, ItemPosition, SquareBoard
from novus.digit import Digit
from novus.event import EventQueue
from novus.filters import (
    DEFAULT_FILTER_ORDER,
    FilterContext,
    FilterKind,
    resolve_filters,
    run_filter,
    scan_blocks,
    scan_columns,
    scan_rows,
)
from novus.positions import BlockPositions, ColumnPositions, Positions, RowPositions
from novus.square import Square


def _boards() -> tuple[SquareBoard, CandidateBoard]:
    board = SquareBoard((Square() for _ in range(81)), 3, 3)
    return board, CandidateBoard.from_board(board)


def _run(kind: FilterKind, board: SquareBoard, candidates: CandidateBoard) -> bool:
    queue = EventQueue()
    run_filter(kind, board, candidates, FilterContext(), queue)
    changed = False
    for event in queue.drain():
        assert event.source == kind.value
        changed = event.evaluate(candidates) or changed
    return changed


def _cell(candidates: CandidateBoard, row: int, col: int) -> list[int]:
    return [d.get() for d in candidates.item_at(ItemPosition(row, col)).possible_digits()]


def _strip(candidates: CandidateBoard, digit: int, cells: list[tuple[int, int]]) -> None:
    for row, col in cells:
        candidates.item_at_mut(ItemPosition(row, col)).remove(Digit(digit))


def test_naked_single_removes_fixed_digit_from_its_scopes() -> None:
    board, _ = _boards()
    board.fix_digit_at(ItemPosition(0, 0), Digit(5))
    candidates = CandidateBoard.from_board(board)

    assert _run(FilterKind.NAKED_SINGLE, board, candidates) is True
    assert 5 not in _cell(candidates, 0, 8)
    assert 5 not in _cell(candidates, 8, 0)
    assert 5 not in _cell(candidates, 2, 2)
    assert 5 in _cell(candidates, 4, 4)
    assert _cell(candidates, 0, 0) == []

    assert _run(FilterKind.NAKED_SINGLE, board, candidates) is False


def test_single_candidate_then_harvest_fixes_hidden_single() -> None:
    board, candidates = _boards()
    _strip(candidates, 7, [(3, col) for col in range(9) if col != 5])

    assert _run(FilterKind.SINGLE_CANDIDATE, board, candidates) is True
    assert _cell(candidates, 3, 5) == [7]

    pos = ItemPosition(3, 5)
    board.fix_digit_at(pos, candidates.take_fixed_digit_at(pos))
    assert str(board.item_at(pos)) == "7"
    assert not candidates.item_at(pos).has_candidate()


def test_hidden_pair_reduces_cells_to_the_pair() -> None:
    board, candidates = _boards()
    others = [(0, col) for col in range(9) if col not in (2, 6)]
    _strip(candidates, 3, others)
    _strip(candidates, 8, others)

    assert _run(FilterKind.HIDDEN_PAIR, board, candidates) is True
    assert _cell(candidates, 0, 2) == [3, 8]
    assert _cell(candidates, 0, 6) == [3, 8]
    assert len(_cell(candidates, 0, 0)) == 7


def test_hidden_pair_requires_identical_positions() -> None:
    board, candidates = _boards()
    _strip(candidates, 3, [(0, col) for col in range(9) if col not in (2, 6)])
    _strip(candidates, 8, [(0, col) for col in range(9) if col not in (2, 6, 7)])

    queue = EventQueue()
    run_filter(FilterKind.HIDDEN_PAIR, board, candidates, FilterContext(), queue)
    assert len(queue) == 0


def test_hidden_triple_reduces_three_cells() -> None:
    board, candidates = _boards()
    others = [(4, col) for col in range(9) if col not in (0, 4, 8)]
    for digit in (1, 2, 9):
        _strip(candidates, digit, others)

    assert _run(FilterKind.HIDDEN_TRIPLE, board, candidates) is True
    for col in (0, 4, 8):
        assert _cell(candidates, 4, col) == [1, 2, 9]


def test_hidden_quad_reduces_four_cells() -> None:
    board, candidates = _boards()
    others = [(2, col) for col in range(9) if col not in (0, 3, 5, 8)]
    for digit in (2, 4, 6, 7):
        _strip(candidates, digit, others)

    assert _run(FilterKind.HIDDEN_QUAD, board, candidates) is True
    assert [_cell(candidates, 2, col) for col in (0, 3, 5, 8)] == [[2, 4, 6, 7]] * 4
    assert _cell(candidates, 2, 1) == [1, 3, 5, 8, 9]

def test_locked_candidate_pointing_clears_rest_of_row() -> None:
    board, candidates = _boards()
    _strip(candidates, 4, [(row, col) for row in (1, 2) for col in range(3)])

    assert _run(FilterKind.LOCKED_CANDIDATE_POINTING, board, candidates) is True
    for col in range(3, 9):
        assert 4 not in _cell(candidates, 0, col)
    for col in range(3):
        assert 4 in _cell(candidates, 0, col)
    assert 4 in _cell(candidates, 1, 3)


def test_locked_candidate_claiming_row_clears_rest_of_block() -> None:
    board, candidates = _boards()
    _strip(candidates, 6, [(5, col) for col in range(9) if col not in (3, 4)])

    assert _run(FilterKind.LOCKED_CANDIDATE_CLAIMING, board, candidates) is True
    for row in (3, 4):
        for col in (3, 4, 5):
            assert 6 not in _cell(candidates, row, col)
    assert 6 in _cell(candidates, 5, 3)
    assert 6 in _cell(candidates, 5, 4)
    assert 6 in _cell(candidates, 3, 0)


def test_locked_candidate_claiming_column_clears_rest_of_block() -> None:
    board, candidates = _boards()
    _strip(candidates, 1, [(row, 2) for row in range(9) if row not in (6, 8)])

    assert _run(FilterKind.LOCKED_CANDIDATE_CLAIMING, board, candidates) is True
    for row in (6, 7, 8):
        for col in (0, 1):
            assert 1 not in _cell(candidates, row, col)
    assert 1 in _cell(candidates, 6, 2)
    assert 1 in _cell(candidates, 8, 2)
    assert 1 in _cell(candidates, 6, 3)


def test_filters_emit_nothing_on_an_open_board() -> None:
    board, candidates = _boards()
    for kind in DEFAULT_FILTER_ORDER:
        assert _run(kind, board, candidates) is False


def test_resolve_filters_accepts_values_and_names() -> None:
    assert resolve_filters(None) == DEFAULT_FILTER_ORDER
    assert resolve_filters(["HiddenPair", "naked_single"]) == (
        FilterKind.HIDDEN_PAIR,
        FilterKind.NAKED_SINGLE,
    )
    with pytest.raises(ValueError):
        resolve_filters([])
    with pytest.raises(ValueError):
        resolve_filters(["NakedSingle", "NakedSingle"])
    with pytest.raises(ValueError):
        resolve_filters(["XWing"])


def test_scope_walks_pair_cells_with_matching_scopes() -> None:
    board = SquareBoard((Square() for _ in range(81)), 3, 3)
    seen = []

    def visit(cells, scope_fn) -> None:
        seen.append((len(list(cells)), scope_fn(Positions.with_positions([0]))))

    scan_rows(board, visit)
    scan_columns(board, visit)
    scan_blocks(board, visit)

    assert len(seen) == 27
    assert all(size == 9 for size, _ in seen)
    rows = [scope for _, scope in seen[:9]]
    assert rows[4] == RowPositions(4, Positions.with_positions([0]))
    assert isinstance(seen[9][1], ColumnPositions) and seen[17][1].column == 8
    last_block = seen[26][1]
    assert isinstance(last_block, BlockPositions)
    assert (last_block.block_at.row, last_block.block_at.col) == (2, 2)
