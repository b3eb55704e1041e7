import operator as op
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal

from loguru import logger
from typing_extensions import override

from rangecheck.errors import TypeMismatch
from rangecheck.predicate import DualPredicate, Predicate, T
from rangecheck.util import DEFAULT_END_INCLUSIVE, DEFAULT_START_INCLUSIVE


def _compare(
    operator: Callable[[Any, Any], bool],
    value: Any,
    bound: Any,
    edge: Literal["start", "end", "bounds"],
) -> bool:
    try:
        return bool(operator(value, bound))
    except TypeError as exc:
        raise TypeMismatch(value=value, bound=bound, edge=edge) from exc


@dataclass(frozen=True, kw_only=True)
class _RangeBounds(Generic[T]):
    start: T | None = None
    end: T | None = None
    start_inclusive: bool | None = DEFAULT_START_INCLUSIVE
    end_inclusive: bool | None = DEFAULT_END_INCLUSIVE

    def __post_init__(self) -> None:
        # None flags fall back to the defaults once, here
        if self.start_inclusive is None:
            object.__setattr__(self, "start_inclusive", DEFAULT_START_INCLUSIVE)
        if self.end_inclusive is None:
            object.__setattr__(self, "end_inclusive", DEFAULT_END_INCLUSIVE)

        if self.is_empty:
            logger.debug("Built empty range {}; no value will match", self)

    @property
    def is_empty(self) -> bool:
        """True if the bounds alone rule out every value.

        That is start > end, or start == end with either side exclusive.
        Ranges over discrete types such as ``(1, 2)`` are not detected.
        """
        if self.start is None or self.end is None:
            return False
        if _compare(op.gt, self.start, self.end, "bounds"):
            return True
        both_inclusive = self.start_inclusive and self.end_inclusive
        return not both_inclusive and _compare(op.eq, self.start, self.end, "bounds")

    def _overlaps(self, low: T | None, high: T | None) -> bool:
        """Pair check shared by both predicates: high vs start, low vs end."""
        if low is None or high is None:
            return False

        if self.start is not None:
            check = op.ge if self.start_inclusive else op.gt
            if not _compare(check, high, self.start, "start"):
                return False

        if self.end is not None:
            check = op.le if self.end_inclusive else op.lt
            if not _compare(check, low, self.end, "end"):
                return False

        return True

    @override
    def __str__(self) -> str:
        """Interval notation, e.g. ``[10, 20)`` or ``(-inf, 5]``."""
        if self.start is None:
            lower = "(-inf"
        else:
            lower = ("[" if self.start_inclusive else "(") + repr(self.start)
        if self.end is None:
            upper = "+inf)"
        else:
            upper = repr(self.end) + ("]" if self.end_inclusive else ")")
        return f"{lower}, {upper}"


@dataclass(frozen=True, kw_only=True)
class InRangeDual(_RangeBounds[T], DualPredicate[T]):
    """Tests whether a (low, high) pair overlaps the range [start, end].

    The high value is checked against ``start`` and the low value against
    ``end``, so ``test(low, high)`` is true when the interval [low, high]
    intersects the range. A missing bound is unbounded on that side and
    either value being ``None`` gives ``False``.

    Example:
        >>> window = InRangeDual(start=10, end=20)
        >>> window.test(5, 12)
        True
        >>> window.test(21, 30)
        False
    """

    @override
    def test(self, low: T | None, high: T | None) -> bool:
        return self._overlaps(low, high)

    def single(self) -> "InRange[T]":
        """Return the single-value predicate over the same range."""
        return InRange(
            start=self.start,
            end=self.end,
            start_inclusive=self.start_inclusive,
            end_inclusive=self.end_inclusive,
        )


@dataclass(frozen=True, kw_only=True)
class InRange(_RangeBounds[T], Predicate[T]):
    """Tests whether a value lies within the range [start, end].

    Both ends are inclusive by default; toggle them with ``start_inclusive``
    and ``end_inclusive``. A missing start or end is unbounded on that side.
    A ``None`` value never matches.

    Example:
        >>> adults = InRange(start=18)
        >>> adults.test(30)
        True
        >>> 17 in adults
        False
    """

    @override
    def test(self, value: T | None) -> bool:
        if value is None:
            return False
        return self._overlaps(value, value)

    def __contains__(self, value: T | None) -> bool:
        return self.test(value)

    def dual(self) -> InRangeDual[T]:
        """Return the (low, high) predicate over the same range."""
        return InRangeDual(
            start=self.start,
            end=self.end,
            start_inclusive=self.start_inclusive,
            end_inclusive=self.end_inclusive,
        )
