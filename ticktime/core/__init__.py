"""
Core time model

Defines WHAT elapsed time is, independent of any loop, engine, or storage.

Invariants:
- Time is a Duration: non-negative, nanosecond exact.
- Stopwatch.elapsed changes ONLY via tick (unpaused), set_elapsed, reset.
- reset never touches the paused flag.
- Accumulation saturates at Duration.MAX, it never wraps.

Core explicitly does NOT:
- Read any clock
- Serialize itself or register with reflection (see ticktime.adapters)
- Synchronize across threads

Time advancement is always external.
"""
from .duration import Duration
from .stopwatch import Stopwatch

__all__ = ["Duration", "Stopwatch"]
