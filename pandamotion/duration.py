"""Millisecond-resolution durations."""

from __future__ import annotations

import functools
import operator
from datetime import timedelta

_ONE_MS = timedelta(milliseconds=1)


def _as_count(value: object, what: str) -> int:
    try:
        count = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}") from None
    if count < 0:
        raise ValueError(f"{what} must not be negative, got {count}")
    return count


@functools.total_ordering
class Duration:
    """An immutable, non-negative duration counted in whole milliseconds."""

    __slots__ = ("_ms",)

    def __init__(self, milliseconds: int = 0) -> None:
        self._ms = _as_count(milliseconds, "milliseconds")

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Create a duration from a timedelta, truncated to whole milliseconds."""
        if not isinstance(delta, timedelta):
            raise TypeError(f"expected a timedelta, not {type(delta).__name__}")
        return cls(delta // _ONE_MS)

    def to_timedelta(self) -> timedelta:
        """Return the duration as a timedelta."""
        return timedelta(milliseconds=self._ms)

    def to_sec(self) -> float:
        """Return the duration in seconds."""
        return self._ms / 1000.0

    def to_msec(self) -> int:
        """Return the duration in milliseconds."""
        return self._ms

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ms + other._ms)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        if other._ms > self._ms:
            raise ValueError("subtraction would produce a negative duration")
        return Duration(self._ms - other._ms)

    def __mul__(self, factor: object) -> Duration:
        if isinstance(factor, (Duration, bool)):
            return NotImplemented
        try:
            count = _as_count(factor, "factor")
        except TypeError:
            return NotImplemented
        return Duration(self._ms * count)

    def __rmul__(self, factor: object) -> Duration:
        return self.__mul__(factor)

    def __truediv__(self, other: object) -> Duration | int:
        """Divide by a duration (giving a whole count) or by an integer (giving a duration)."""
        if isinstance(other, Duration):
            if other._ms == 0:
                raise ZeroDivisionError("division by a zero duration")
            return self._ms // other._ms
        try:
            divisor = _as_count(other, "divisor")
        except TypeError:
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("division of a duration by zero")
        return Duration(self._ms // divisor)

    def __floordiv__(self, other: object) -> Duration | int:
        return self.__truediv__(other)

    def __mod__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            modulus = other._ms
        else:
            try:
                modulus = _as_count(other, "modulus")
            except TypeError:
                return NotImplemented
        if modulus == 0:
            raise ZeroDivisionError("modulo by zero")
        return Duration(self._ms % modulus)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms < other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f"Duration({self._ms})"