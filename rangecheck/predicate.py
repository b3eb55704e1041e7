from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


class Predicate(ABC, Generic[T]):
    """Boolean test over a single value."""

    @abstractmethod
    def test(self, value: T | None) -> bool:
        pass

    def __call__(self, value: T | None) -> bool:
        return self.test(value)


class DualPredicate(ABC, Generic[T]):
    """Boolean test over a (low, high) pair of values."""

    @abstractmethod
    def test(self, low: T | None, high: T | None) -> bool:
        pass

    def __call__(self, low: T | None, high: T | None) -> bool:
        return self.test(low, high)
