from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import timedelta
from fractions import Fraction
from typing import ClassVar, Optional

import numpy as np

from ticktime.utils.errors import InvalidDurationError

# ticktime/core/duration.py
NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000
MAX_SECS = 2**64 - 1
MAX_TOTAL_NANOS = MAX_SECS * NANOS_PER_SEC + (NANOS_PER_SEC - 1)


def _as_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDurationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


def _as_seconds_float(value, name: str) -> float:
    try:
        secs = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidDurationError(f"{name} must be a number, got {value!r}") from e
    if math.isnan(secs) or math.isinf(secs):
        raise InvalidDurationError(f"{name} must be finite, got {secs}")
    if secs < 0:
        raise InvalidDurationError(f"{name} must be non-negative, got {secs}")
    return secs


@dataclass(frozen=True, order=True)
class Duration:
    """
    Non-negative span of time with nanosecond precision.

    - secs:  whole seconds, 0 <= secs <= MAX_SECS
    - nanos: sub-second part, 0 <= nanos < 1e9

    Negative values are not representable; every constructor rejects them.
    Arithmetic never wraps: use saturating_* to clamp or checked_* to get
    None, the plain operators raise OverflowError.
    """

    secs: int = 0
    nanos: int = 0

    ZERO: ClassVar["Duration"]
    MAX: ClassVar["Duration"]

    def __post_init__(self):
        secs = _as_int(self.secs, "secs")
        nanos = _as_int(self.nanos, "nanos")
        if not 0 <= secs <= MAX_SECS:
            raise InvalidDurationError(f"secs out of range: {secs}")
        if not 0 <= nanos < NANOS_PER_SEC:
            raise InvalidDurationError(f"nanos out of range: {nanos}")
        # normalize numpy / other Integral types to plain int
        object.__setattr__(self, "secs", secs)
        object.__setattr__(self, "nanos", nanos)

    # ------------------------------------------------------------------
    # constructors
    # ------------------------------------------------------------------
    @classmethod
    def _from_total_nanos(cls, total: int) -> "Duration":
        if total < 0:
            raise InvalidDurationError(f"negative duration: {total}ns")
        if total > MAX_TOTAL_NANOS:
            raise InvalidDurationError(f"duration overflow: {total}ns")
        secs, nanos = divmod(total, NANOS_PER_SEC)
        return cls(secs, nanos)

    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls(_as_int(secs, "secs"), 0)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        return cls._from_total_nanos(_as_int(millis, "millis") * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        return cls._from_total_nanos(_as_int(micros, "micros") * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        return cls._from_total_nanos(_as_int(nanos, "nanos"))

    @classmethod
    def from_secs_f64(cls, secs: float) -> "Duration":
        """Round a float seconds value to the nearest nanosecond."""
        value = _as_seconds_float(secs, "secs")
        return cls._from_total_nanos(round(Fraction(value) * NANOS_PER_SEC))

    @classmethod
    def from_secs_f32(cls, secs: float) -> "Duration":
        """Same as from_secs_f64, after narrowing to single precision."""
        value = _as_seconds_float(secs, "secs")
        with np.errstate(over="ignore"):
            narrowed = float(np.float32(value))
        if math.isinf(narrowed):
            raise InvalidDurationError(f"secs out of single precision range: {value}")
        return cls._from_total_nanos(round(Fraction(narrowed) * NANOS_PER_SEC))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "Duration":
        if td < timedelta(0):
            raise InvalidDurationError(f"negative timedelta: {td}")
        total = (td.days * 86_400 + td.seconds) * NANOS_PER_SEC
        return cls._from_total_nanos(total + td.microseconds * NANOS_PER_MICRO)

    # ------------------------------------------------------------------
    # accessors
    # ------------------------------------------------------------------
    def is_zero(self) -> bool:
        return self.secs == 0 and self.nanos == 0

    def as_secs(self) -> int:
        return self.secs

    def subsec_nanos(self) -> int:
        return self.nanos

    def subsec_micros(self) -> int:
        return self.nanos // NANOS_PER_MICRO

    def subsec_millis(self) -> int:
        return self.nanos // NANOS_PER_MILLI

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_micros(self) -> int:
        return self.as_nanos() // NANOS_PER_MICRO

    def as_millis(self) -> int:
        return self.as_nanos() // NANOS_PER_MILLI

    def as_secs_f32(self) -> np.float32:
        return np.float32(self.secs) + np.float32(self.nanos) / np.float32(NANOS_PER_SEC)

    def as_secs_f64(self) -> float:
        return float(self.secs) + self.nanos / NANOS_PER_SEC

    def to_timedelta(self) -> timedelta:
        """Truncates to microseconds; OverflowError past timedelta.max."""
        return timedelta(seconds=self.secs, microseconds=self.nanos // NANOS_PER_MICRO)

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------
    def checked_add(self, other: "Duration") -> Optional["Duration"]:
        total = self.as_nanos() + other.as_nanos()
        if total > MAX_TOTAL_NANOS:
            return None
        return Duration._from_total_nanos(total)

    def checked_sub(self, other: "Duration") -> Optional["Duration"]:
        total = self.as_nanos() - other.as_nanos()
        if total < 0:
            return None
        return Duration._from_total_nanos(total)

    def saturating_add(self, other: "Duration") -> "Duration":
        result = self.checked_add(other)
        return Duration.MAX if result is None else result

    def saturating_sub(self, other: "Duration") -> "Duration":
        result = self.checked_sub(other)
        return Duration.ZERO if result is None else result

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise OverflowError("overflow when adding durations")
        return result

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise OverflowError("overflow when subtracting durations")
        return result

    def __str__(self) -> str:
        if self.nanos == 0:
            return f"{self.secs}s"
        return f"{self.secs}.{self.nanos:09d}".rstrip("0") + "s"


Duration.ZERO = Duration(0, 0)
Duration.MAX = Duration(MAX_SECS, NANOS_PER_SEC - 1)
