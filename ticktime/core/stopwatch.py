from __future__ import annotations

import numpy as np

from ticktime.core.duration import Duration
from ticktime.utils.logger import logs

# ticktime/core/stopwatch.py


class Stopwatch:
    """
    Caller-driven elapsed time accumulator.

    - never reads a clock: tick(delta) MUST be called once per update
    - pause() gates tick() only; every other operation works in both states
    - accumulation saturates at Duration.MAX

    Example:
        sw = Stopwatch()
        sw.tick(Duration.from_secs_f32(1.0))
        sw.elapsed_secs()       # 1.0

        sw.pause()
        sw.tick(Duration.from_secs_f32(1.0))
        sw.elapsed_secs()       # still 1.0

        sw.reset()
        sw.is_paused()          # True
        sw.elapsed_secs()       # 0.0
    """

    __slots__ = ("_elapsed", "_is_paused")

    def __init__(self):
        self._elapsed: Duration = Duration.ZERO
        self._is_paused: bool = False

    # ------------------------------------------------------------------
    # read
    # ------------------------------------------------------------------
    def elapsed(self) -> Duration:
        """Elapsed time since the last reset."""
        return self._elapsed

    def elapsed_secs(self) -> np.float32:
        return self._elapsed.as_secs_f32()

    def elapsed_secs_f64(self) -> float:
        return self._elapsed.as_secs_f64()

    def is_paused(self) -> bool:
        return self._is_paused

    # ------------------------------------------------------------------
    # write
    # ------------------------------------------------------------------
    def set_elapsed(self, time: Duration) -> None:
        """Overwrite the elapsed time, whether paused or not."""
        self._elapsed = time

    def tick(self, delta: Duration) -> "Stopwatch":
        """
        Advance by delta unless paused. Returns self so the post-tick state
        can be inspected inline: sw.tick(dt).elapsed()
        """
        if not self._is_paused:
            before = self._elapsed
            result = before.checked_add(delta)
            if result is None:
                # clamped; warn only on the first overflowing tick
                if before != Duration.MAX:
                    logs.warning(
                        f"[Stopwatch] elapsed saturated at {Duration.MAX} (delta={delta})"
                    )
                result = Duration.MAX
            self._elapsed = result
        return self

    def pause(self) -> None:
        if not self._is_paused:
            logs.debug(f"[Stopwatch] pause at elapsed={self._elapsed}")
        self._is_paused = True

    def unpause(self) -> None:
        if self._is_paused:
            logs.debug(f"[Stopwatch] unpause at elapsed={self._elapsed}")
        self._is_paused = False

    def reset(self) -> None:
        """Zero the elapsed time. The paused flag is left as is."""
        if not self._elapsed.is_zero():
            logs.debug(f"[Stopwatch] reset from elapsed={self._elapsed}")
        self._elapsed = Duration.ZERO

    # ------------------------------------------------------------------
    # value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Stopwatch):
            return NotImplemented
        return self._elapsed == other._elapsed and self._is_paused == other._is_paused

    __hash__ = None

    def __copy__(self) -> "Stopwatch":
        clone = Stopwatch.__new__(Stopwatch)
        clone._elapsed = self._elapsed
        clone._is_paused = self._is_paused
        return clone

    def __deepcopy__(self, memo) -> "Stopwatch":
        # Duration is immutable, a shallow copy is already independent
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self._elapsed!r}, is_paused={self._is_paused})"
