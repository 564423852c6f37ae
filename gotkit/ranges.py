"""Intervals over ordered values with open, closed and half-open bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any


class IntervalType(IntFlag):
    """Which ends of an interval are closed."""

    OPEN = 0
    LEFT_CLOSED = 1
    RIGHT_CLOSED = 2
    CLOSED = 3
    LCLOSED_ROPEN = 1
    LOPEN_RCLOSED = 2


@dataclass(frozen=True)
class Range:
    """An interval between ``low`` and ``high`` of the given kind."""

    low: Any
    high: Any
    kind: IntervalType = IntervalType.CLOSED

    def cover(self, x: Any) -> bool:
        """Return whether ``x`` lies inside the interval."""
        left_ok = x > self.low or (
            bool(self.kind & IntervalType.LEFT_CLOSED) and x == self.low
        )
        right_ok = x < self.high or (
            bool(self.kind & IntervalType.RIGHT_CLOSED) and x == self.high
        )
        return left_ok and right_ok

    def is_empty(self) -> bool:
        """Return whether the interval holds no values at all."""
        return not (
            self.high > self.low
            or (self.kind == IntervalType.CLOSED and self.high == self.low)
        )


@dataclass(frozen=True)
class EmptyRange:
    """An interval that contains nothing."""

    def cover(self, x: Any) -> bool:
        """Return whether ``x`` lies inside; an empty interval holds nothing."""
        return not self.is_empty()

    def is_empty(self) -> bool:
        """Always True."""
        return True


def new_range(low: Any, high: Any, kind: IntervalType) -> Range:
    """Build a range of the given kind."""
    return Range(low, high, IntervalType(kind))


def new_open_range(low: Any, high: Any) -> Range:
    """Build an open range ``(low, high)``."""
    return new_range(low, high, IntervalType.OPEN)


def new_closed_range(low: Any, high: Any) -> Range:
    """Build a closed range ``[low, high]``."""
    return new_range(low, high, IntervalType.CLOSED)


def new_empty_range() -> EmptyRange:
    """Build a range that covers nothing."""
    return EmptyRange()