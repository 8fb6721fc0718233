from __future__ import annotations

import pytest

from novus.digit import Digit, all_digits
from novus.digit_set import DigitSet
from novus.errors import InvalidDigit
from novus.flags import Flags32
from novus.positions import Positions


def _digits(*values: int) -> list[Digit]:
    return [Digit(v) for v in values]


def test_digit_accepts_only_one_to_nine() -> None:
    assert Digit(1).get() == 1
    assert Digit.from_char("9").to_char() == "9"
    for bad in (0, 10, -3):
        with pytest.raises(InvalidDigit):
            Digit(bad)
    for bad in ("0", "a", ".", "12"):
        with pytest.raises(InvalidDigit):
            Digit.from_char(bad)


def test_invalid_digit_is_value_error() -> None:
    with pytest.raises(ValueError) as excinfo:
        Digit.from_int(42)
    assert excinfo.value.value == 42


def test_all_digits_ascending() -> None:
    assert [d.get() for d in all_digits()] == list(range(1, 10))


def test_flags32_set_unset_and_bounds() -> None:
    flags = Flags32()
    flags.set(0)
    flags.set(31)
    assert flags.num_set() == 2
    assert flags.get(31)
    flags.unset(0)
    assert not flags.get(0)
    assert (~Flags32()).num_set() == 32
    with pytest.raises(AssertionError):
        flags.set(32)


def test_digit_set_behaves_as_a_set() -> None:
    digits = DigitSet(_digits(3, 8))
    assert len(digits) == 2
    assert Digit(3) in digits
    assert Digit(4) not in digits

    digits.set(Digit(3))
    assert len(digits) == 2

    assert digits.remove(Digit(3)) is True
    assert digits.remove(Digit(3)) is False
    assert list(digits) == _digits(8)

    digits.clear()
    assert digits.is_empty()


def test_digit_set_iterates_in_ascending_order() -> None:
    digits = DigitSet(_digits(9, 2, 5))
    assert list(digits) == _digits(2, 5, 9)
    assert DigitSet.full() == DigitSet(all_digits())


def test_digit_set_copy_is_independent() -> None:
    original = DigitSet(_digits(1, 2))
    clone = original.copy()
    clone.remove(Digit(1))
    assert Digit(1) in original
    assert (original & clone) == DigitSet(_digits(2))
    assert (original | DigitSet(_digits(7))) == DigitSet(_digits(1, 2, 7))


def test_positions_invert_twice_restores_set() -> None:
    positions = Positions.with_positions([0, 4, 8])
    inverted = positions.invert(9)
    assert list(inverted) == [1, 2, 3, 5, 6, 7]
    assert inverted.invert(9) == positions


def test_positions_set_operations() -> None:
    row = Positions.with_offset(3, 3)
    assert list(row) == [3, 4, 5]
    assert Positions.with_positions([3, 5]).belongs_to(row)
    assert not Positions.with_positions([2, 5]).belongs_to(row)
    assert row.and_(Positions.with_positions([5, 6])) == Positions.with_positions([5])
    assert len(row.or_(Positions.with_positions([0]))) == 4


def test_positions_select_items() -> None:
    positions = Positions.with_positions([1, 3])
    assert list(positions.items_from_iter("abcde")) == ["b", "d"]


@pytest.mark.parametrize("value", [Flags32(0b101), DigitSet(_digits(3)), Positions.with_positions([1])])
def test_mutable_bitsets_are_unhashable(value) -> None:
    with pytest.raises(TypeError):
        hash(value)
