#!filepath: tests/core/test_duration.py
from datetime import timedelta

import numpy as np
import pytest

from ticktime.core.duration import MAX_SECS, NANOS_PER_SEC, Duration
from ticktime.utils.errors import InvalidDurationError


def test_zero_and_max():
    assert Duration() == Duration.ZERO
    assert Duration.ZERO.is_zero()
    assert Duration.MAX.secs == MAX_SECS
    assert Duration.MAX.nanos == NANOS_PER_SEC - 1


@pytest.mark.parametrize(
    "secs, nanos",
    [(-1, 0), (0, -1), (0, NANOS_PER_SEC), (MAX_SECS + 1, 0), (1.5, 0), (True, 0)],
)
def test_invalid_fields_rejected(secs, nanos):
    with pytest.raises(InvalidDurationError):
        Duration(secs, nanos)


def test_numpy_integers_are_normalized():
    d = Duration(np.int64(3), np.int32(7))
    assert d == Duration(3, 7)
    assert type(d.secs) is int


def test_integer_constructors_carry():
    assert Duration.from_secs(2) == Duration(2, 0)
    assert Duration.from_millis(1_500) == Duration(1, 500_000_000)
    assert Duration.from_micros(2_000_001) == Duration(2, 1_000)
    assert Duration.from_nanos(3 * NANOS_PER_SEC + 5) == Duration(3, 5)


def test_float_constructors():
    assert Duration.from_secs_f64(1.5) == Duration(1, 500_000_000)
    assert Duration.from_secs_f32(1.0) == Duration.from_secs(1)
    # 0.1 is not exact in single precision
    assert Duration.from_secs_f32(0.1) == Duration(0, 100_000_001)
    assert Duration.from_secs_f64(0.1) == Duration(0, 100_000_000)


@pytest.mark.parametrize("value", [-0.5, float("nan"), float("inf"), 1e30])
def test_float_constructor_rejects(value):
    with pytest.raises(InvalidDurationError):
        Duration.from_secs_f64(value)


def test_negative_integer_constructor_rejected():
    with pytest.raises(InvalidDurationError):
        Duration.from_millis(-1)


def test_timedelta_interop():
    d = Duration.from_timedelta(timedelta(days=1, seconds=2, microseconds=3))
    assert d == Duration(86_402, 3_000)
    assert d.to_timedelta() == timedelta(days=1, seconds=2, microseconds=3)

    with pytest.raises(InvalidDurationError):
        Duration.from_timedelta(timedelta(seconds=-1))

    with pytest.raises(OverflowError):
        Duration.MAX.to_timedelta()


def test_accessors():
    d = Duration(2, 345_678_901)
    assert d.as_secs() == 2
    assert d.subsec_nanos() == 345_678_901
    assert d.subsec_micros() == 345_678
    assert d.subsec_millis() == 345
    assert d.as_nanos() == 2_345_678_901
    assert d.as_micros() == 2_345_678
    assert d.as_millis() == 2_345


def test_secs_float_conversions():
    d = Duration(1, 500_000_000)
    assert isinstance(d.as_secs_f32(), np.float32)
    assert d.as_secs_f32() == np.float32(1.5)
    assert isinstance(d.as_secs_f64(), float)
    assert d.as_secs_f64() == 1.5


def test_checked_and_saturating():
    one = Duration.from_secs(1)
    assert Duration.MAX.checked_add(one) is None
    assert Duration.MAX.saturating_add(one) == Duration.MAX
    assert Duration.ZERO.checked_sub(one) is None
    assert Duration.ZERO.saturating_sub(one) == Duration.ZERO
    assert Duration(1, 900_000_000).checked_add(Duration(0, 200_000_000)) == Duration(2, 100_000_000)
    assert Duration(2, 100_000_000).checked_sub(Duration(0, 200_000_000)) == Duration(1, 900_000_000)


def test_operators():
    assert Duration(1, 0) + Duration(0, 5) == Duration(1, 5)
    assert Duration(1, 5) - Duration(0, 5) == Duration(1, 0)

    with pytest.raises(OverflowError):
        Duration.MAX + Duration(0, 1)
    with pytest.raises(OverflowError):
        Duration.ZERO - Duration(0, 1)
    with pytest.raises(TypeError):
        Duration(1, 0) + 1.0


def test_ordering_and_hash():
    assert Duration(1, 0) < Duration(1, 1) < Duration(2, 0)
    assert len({Duration(1, 0), Duration.from_millis(1_000)}) == 1


def test_str():
    assert str(Duration(1, 0)) == "1s"
    assert str(Duration(1, 500_000_000)) == "1.5s"
    assert str(Duration(0, 1)) == "0.000000001s"
