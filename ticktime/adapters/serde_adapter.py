from __future__ import annotations

from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationError,
    field_validator,
)

from ticktime.core.duration import MAX_SECS, NANOS_PER_SEC, Duration
from ticktime.core.stopwatch import Stopwatch
from ticktime.utils.errors import StopwatchDecodeError
from ticktime.utils.logger import logs


class DurationRecord(BaseModel):
    """
    Duration as seconds + sub-second nanoseconds.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    secs: StrictInt = Field(..., ge=0)
    nanos: StrictInt = Field(..., ge=0, lt=NANOS_PER_SEC)

    @field_validator("secs")
    @classmethod
    def _secs_in_range(cls, v: int) -> int:
        # upper bound checked in python: MAX_SECS does not fit in i64
        if v > MAX_SECS:
            raise ValueError(f"secs must be <= {MAX_SECS}")
        return v


class StopwatchRecord(BaseModel):
    """
    StopwatchRecord (FROZEN)

    Exactly two fields, in this order:
      - elapsed
      - is_paused
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    elapsed: DurationRecord
    is_paused: StrictBool


# ------------------------------------------------------------------
# Duration
# ------------------------------------------------------------------
def duration_to_record(d: Duration) -> DurationRecord:
    return DurationRecord(secs=d.secs, nanos=d.nanos)


def duration_from_record(r: DurationRecord) -> Duration:
    return Duration(r.secs, r.nanos)


# ------------------------------------------------------------------
# Stopwatch
# ------------------------------------------------------------------
def to_record(sw: Stopwatch) -> StopwatchRecord:
    return StopwatchRecord(
        elapsed=duration_to_record(sw.elapsed()),
        is_paused=sw.is_paused(),
    )


def from_record(r: StopwatchRecord) -> Stopwatch:
    sw = Stopwatch()
    sw.set_elapsed(duration_from_record(r.elapsed))
    if r.is_paused:
        sw.pause()
    return sw


def to_dict(sw: Stopwatch) -> dict[str, Any]:
    return to_record(sw).model_dump()


def from_dict(data: Mapping[str, Any]) -> Stopwatch:
    try:
        record = StopwatchRecord.model_validate(data)
    except ValidationError as e:
        logs.debug(f"[serde] invalid stopwatch record: {e.error_count()} error(s)")
        raise StopwatchDecodeError(f"invalid stopwatch record: {e}") from e
    return from_record(record)


def dumps(sw: Stopwatch) -> str:
    """JSON form: {"elapsed": {"secs": .., "nanos": ..}, "is_paused": ..}"""
    return to_record(sw).model_dump_json()


def loads(data: str | bytes) -> Stopwatch:
    try:
        record = StopwatchRecord.model_validate_json(data)
    except ValidationError as e:
        logs.debug(f"[serde] invalid stopwatch json: {e.error_count()} error(s)")
        raise StopwatchDecodeError(f"invalid stopwatch json: {e}") from e
    return from_record(record)
