from __future__ import annotations

from typing import Optional


class CalathError(Exception):
    """Base error."""


class NotInitializedError(CalathError):
    """Raised when a query runs before any calendar definition is installed."""


class OutOfRangeError(CalathError, ValueError):
    """An integer input fell outside its legal closed interval [lo, hi]."""

    def __init__(self, field: str, value: int, lo: int, hi: Optional[int] = None, *, detail: str = ""):
        self.field = field
        self.value = value
        self.lo = lo
        self.hi = hi
        bounds = f"{lo}..{hi}" if hi is not None else f">= {lo}"
        msg = f"{field}={value!r} out of range (expected {bounds})"
        if detail:
            msg += f"; {detail}"
        super().__init__(msg)


class MalformedDefinitionError(CalathError, ValueError):
    """Raised when a calendar definition is structurally inconsistent."""


def check_range(field: str, value: int, lo: int, hi: Optional[int] = None) -> int:
    """Return ``value`` unchanged, or raise OutOfRangeError. ``hi=None`` means unbounded."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}")
    if value < lo or (hi is not None and value > hi):
        raise OutOfRangeError(field, value, lo, hi)
    return value
