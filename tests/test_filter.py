import pytest

from ringfilter.buffer import CircularBuffer
from ringfilter.filter import FirFilter


def _filled(values, size):
    buf = CircularBuffer(size)
    for v in values:
        buf.push(v)
    return buf


def test_zero_order_rejected():
    with pytest.raises(ValueError):
        FirFilter(CircularBuffer(4), 0)


def test_missing_input_rejected():
    with pytest.raises(ValueError):
        FirFilter(None, 4)


def test_default_output_buffer_has_order_size():
    fil = FirFilter(CircularBuffer(8), 4)
    assert fil.output_buffer.size == 4


def test_default_output_needs_power_of_two_order():
    with pytest.raises(ValueError):
        FirFilter(CircularBuffer(8), 3)


def test_coefficients_round_trip():
    fil = FirFilter(CircularBuffer(4), 4)
    fil.coefficients = [0.5, 0.25, 1.0, 2.0]
    assert fil.coefficients == [0.5, 0.25, 1.0, 2.0]


def test_coefficients_length_checked():
    fil = FirFilter(CircularBuffer(4), 4)
    fil.coefficients = [0.5, 0.25, 1.0, 2.0]
    with pytest.raises(ValueError):
        fil.coefficients = [1.0, 2.0]
    assert fil.coefficients == [0.5, 0.25, 1.0, 2.0]


def test_zero_coefficients_give_zero():
    fil = FirFilter(_filled([1, 2, 3, 4], 4), 4)
    assert fil.update() == 0.0
    assert fil.output_buffer.get(0) == 0.0


def test_all_ones_sum_whole_window():
    values = [1, 2, 3, 4]
    fil = FirFilter(_filled(values, 4), 4)
    fil.coefficients = [1, 1, 1, 1]
    result = fil.update()
    assert result == sum(values)
    assert fil.output_buffer.get(0) == result
    assert fil.output_buffer.head == 1


def test_first_tap_reads_slot_at_head():
    inp = _filled([1, 2, 3, 4, 5, 6], 4)
    fil = FirFilter(inp, 4)
    fil.coefficients = [1, 0, 0, 0]
    assert fil.update() == inp.get_newest(0)


def test_order_beyond_input_ignores_extra_taps():
    values = [1, 2]
    fil = FirFilter(_filled(values, 2), 4, CircularBuffer(8))
    fil.coefficients = [1, 1, 100, 100]
    assert fil.update() == sum(values)


def test_repeated_updates_fill_output_in_order():
    inp = _filled([2, 2, 2, 2], 4)
    out = CircularBuffer(4)
    fil = FirFilter(inp, 4, out)
    fil.coefficients = [1, 1, 1, 1]
    results = [fil.update() for _ in range(3)]
    assert [out.get(i) for i in range(3)] == results
    assert out.head == 3