from __future__ import annotations

from novus.action import RemoveAction, RetainAction
from novus.board import BlockPosition, CandidateBoard, ItemPosition, SquareBoard
from novus.digit import Digit
from novus.digit_set import DigitSet
from novus.event import Event, EventQueue
from novus.positions import BlockPositions, ColumnPositions, Positions, RowPositions
from novus.square import Square


def _candidates() -> CandidateBoard:
    return CandidateBoard.from_board(SquareBoard((Square() for _ in range(81)), 3, 3))


def _digits_at(candidates: CandidateBoard, row: int, col: int) -> list[int]:
    return [d.get() for d in candidates.item_at(ItemPosition(row, col)).possible_digits()]


def test_remove_action_touches_only_selected_cells() -> None:
    candidates = _candidates()
    action = RemoveAction(Digit(5), RowPositions(2, Positions.with_positions([0, 8])))

    assert action.apply(candidates) is True
    assert Digit(5) not in candidates.item_at(ItemPosition(2, 0)).digits
    assert Digit(5) not in candidates.item_at(ItemPosition(2, 8)).digits
    assert Digit(5) in candidates.item_at(ItemPosition(2, 1)).digits
    assert action.apply(candidates) is False


def test_retain_action_keeps_only_given_digits() -> None:
    candidates = _candidates()
    scope = ColumnPositions(4, Positions.with_positions([1, 7]))
    action = RetainAction(DigitSet([Digit(3), Digit(8)]), scope)

    assert action.apply(candidates) is True
    assert _digits_at(candidates, 1, 4) == [3, 8]
    assert _digits_at(candidates, 7, 4) == [3, 8]
    assert len(candidates.item_at(ItemPosition(0, 4))) == 9


def test_block_scope_uses_row_major_offsets() -> None:
    candidates = _candidates()
    scope = BlockPositions(BlockPosition(1, 2), Positions.with_positions([4]))
    RetainAction.with_digit(Digit(7), scope).apply(candidates)
    assert _digits_at(candidates, 4, 7) == [7]


def test_event_queue_is_fifo_and_drains() -> None:
    queue = EventQueue()
    first = Event(RemoveAction(Digit(1), RowPositions(0, Positions.with_offset(0, 9))), "a")
    second = Event(RemoveAction(Digit(2), RowPositions(0, Positions.with_offset(0, 9))), "b")
    queue.push_back(first)
    queue.push_back(second)

    assert len(queue) == 2
    assert [event.source for event in queue.drain()] == ["a", "b"]
    assert not queue
    assert queue.pop_front() is None


def test_event_evaluate_applies_its_action() -> None:
    candidates = _candidates()
    event = Event(RemoveAction(Digit(9), ColumnPositions(0, Positions.with_offset(0, 9))))
    assert event.evaluate(candidates) is True
    assert all(Digit(9) not in c.digits for c in candidates.column_items(0))
