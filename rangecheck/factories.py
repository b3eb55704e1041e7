"""Shorthand constructors for common range shapes.

Each returns an immutable :class:`~rangecheck.range.InRange`; use
:meth:`InRange.dual` to get the matching pair predicate.
"""

from rangecheck.predicate import T
from rangecheck.range import InRange, InRangeDual
from rangecheck.util import DEFAULT_END_INCLUSIVE, DEFAULT_START_INCLUSIVE


def in_range(
    start: T | None = None,
    end: T | None = None,
    *,
    start_inclusive: bool | None = DEFAULT_START_INCLUSIVE,
    end_inclusive: bool | None = DEFAULT_END_INCLUSIVE,
) -> InRange[T]:
    """Range over single values.

    Example:
        >>> in_range(10, 20, end_inclusive=False).test(20)
        False
    """
    return InRange(
        start=start,
        end=end,
        start_inclusive=start_inclusive,
        end_inclusive=end_inclusive,
    )


def in_range_dual(
    start: T | None = None,
    end: T | None = None,
    *,
    start_inclusive: bool | None = DEFAULT_START_INCLUSIVE,
    end_inclusive: bool | None = DEFAULT_END_INCLUSIVE,
) -> InRangeDual[T]:
    """Range over (low, high) pairs."""
    return InRangeDual(
        start=start,
        end=end,
        start_inclusive=start_inclusive,
        end_inclusive=end_inclusive,
    )


def between(start: T, end: T, *, inclusive: bool = True) -> InRange[T]:
    """Range with both ends sharing one inclusivity flag."""
    return InRange(
        start=start, end=end, start_inclusive=inclusive, end_inclusive=inclusive
    )


def at_least(start: T) -> InRange[T]:
    return InRange(start=start)


def greater_than(start: T) -> InRange[T]:
    return InRange(start=start, start_inclusive=False)


def at_most(end: T) -> InRange[T]:
    return InRange(end=end)


def less_than(end: T) -> InRange[T]:
    return InRange(end=end, end_inclusive=False)
