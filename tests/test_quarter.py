import pytest

from gridclock.time.quarter import Quarter, QuarterType


@pytest.mark.parametrize("value,expected", [
    (900, 900), (899, 899), (0, 0), (1, 1), (-5, 0), (1000, 900), (450, 450),
])
def test_time_remaining_clamps(value, expected):
    q = Quarter(QuarterType.THIRD)
    q.time_remaining = value
    assert q.time_remaining == expected


@pytest.mark.parametrize("qt", list(QuarterType))
def test_new_quarter_starts_full(qt):
    q = Quarter(qt)
    assert q.time_remaining == 900
    assert q.quarter_type is qt


def test_repeated_reads_are_stable():
    q = Quarter(QuarterType.FIRST)
    q.time_remaining = 321
    assert [q.time_remaining for _ in range(5)] == [321] * 5


def test_quarter_type_is_a_free_label():
    q = Quarter(QuarterType.FIRST)
    q.quarter_type = QuarterType.GAME_OVER
    assert q.quarter_type is QuarterType.GAME_OVER
    assert q.time_remaining == 900


def test_float_input_is_truncated():
    q = Quarter(QuarterType.FIRST)
    q.time_remaining = 12.9
    assert q.time_remaining == 12


def test_custom_duration_caps_the_clock():
    q = Quarter(QuarterType.OVERTIME, 600)
    assert q.max_duration == 600
    assert q.time_remaining == 600
    q.time_remaining = 750
    assert q.time_remaining == 600


@pytest.mark.parametrize("duration", [0, -10, 901])
def test_invalid_duration_rejected(duration):
    with pytest.raises(ValueError):
        Quarter(QuarterType.OVERTIME, duration)


def test_is_expired():
    q = Quarter(QuarterType.SECOND)
    assert not q.is_expired
    q.time_remaining = -1
    assert q.is_expired


@pytest.mark.parametrize("value", ["300", None, [300]])
def test_non_numeric_time_rejected(value):
    q = Quarter(QuarterType.FIRST)
    with pytest.raises(TypeError):
        q.time_remaining = value
    assert q.time_remaining == 900
