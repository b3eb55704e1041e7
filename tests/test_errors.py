"""Tests for type mismatches and empty-range logging."""

import pytest
from loguru import logger

from rangecheck import InRange, InRangeDual, TypeMismatch


def _debug_messages(build):
    """Run build() with rangecheck logging enabled and return captured lines."""
    messages = []
    logger.enable("rangecheck")
    sink_id = logger.add(messages.append, level="DEBUG")
    try:
        build()
    finally:
        logger.remove(sink_id)
        logger.disable("rangecheck")
    return messages


def test_mismatched_value_raises():
    """Probing a numeric range with a string raises TypeMismatch."""
    rng = InRange(start=1, end=10)

    with pytest.raises(TypeMismatch, match="Cannot compare str 'x'"):
        rng.test("x")


def test_mismatch_records_failing_edge():
    """The error names the bound that could not be compared."""
    with pytest.raises(TypeMismatch) as info:
        InRange(end=10).test("x")

    assert info.value.edge == "end"
    assert info.value.bound == 10
    assert info.value.value == "x"
    assert isinstance(info.value.__cause__, TypeError)


def test_mismatch_is_a_type_error():
    """Callers catching TypeError also catch TypeMismatch."""
    with pytest.raises(TypeError):
        InRangeDual(start=1).test("a", "b")


def test_mismatched_bounds_raise_at_construction():
    """Bounds of different types fail when the range is built, not on use."""
    with pytest.raises(TypeMismatch, match="Range start 1 .* cannot be ordered") as info:
        InRange(start=1, end="z")

    assert info.value.edge == "bounds"
    assert info.value.value == 1
    assert info.value.bound == "z"


def test_none_value_is_not_an_error():
    """A None value is a plain non-match."""
    assert InRange(start=1, end=10).test(None) is False


def test_empty_range_logs_debug():
    """Building an empty range logs one debug line; a normal range logs none."""

    def build():
        InRange(start=10, end=1)
        InRange(start=1, end=10)

    messages = _debug_messages(build)

    assert len(messages) == 1
    assert "Built empty range [10, 1]" in messages[0]


def test_empty_dual_range_logs_once():
    """An empty pair predicate logs exactly once too."""
    messages = _debug_messages(lambda: InRangeDual(start=5, end=5, end_inclusive=False))

    assert len(messages) == 1
    assert "Built empty range [5, 5)" in messages[0]


def test_converting_empty_range_logs_for_the_new_range_only():
    """dual() builds one new range, so it adds exactly one more line."""
    rng = InRange(start=10, end=1)

    messages = _debug_messages(rng.dual)

    assert len(messages) == 1
