# ticktime/utils/errors.py
class TicktimeError(Exception):
    """Base class for every error raised by ticktime."""


class InvalidDurationError(TicktimeError, ValueError):
    """
    Raised when a Duration would be negative, NaN, infinite, or larger
    than Duration.MAX.
    """


class StopwatchDecodeError(TicktimeError, ValueError):
    """
    Raised when a serialized stopwatch record cannot be decoded.
    The pydantic ValidationError is kept as __cause__.
    """


class UnregisteredTypeError(TicktimeError, KeyError):
    pass


class MissingCapabilityError(TicktimeError, TypeError):
    pass
