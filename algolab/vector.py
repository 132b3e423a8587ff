"""A growable sequence that tracks its own capacity and growth policy."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Callable, Iterator

__all__ = ["CapacityMethod", "Vector"]

_UINT32_MAX = 2**32 - 1
_DEFAULT_CAPACITY = 1741


class CapacityMethod(IntEnum):
    """How a full vector grows."""

    DOUBLE = 1
    LOG = 2


class Vector:
    """Sequence with explicit capacity, growing by doubling or by a log step."""

    def __init__(
        self,
        capacity: int = _DEFAULT_CAPACITY,
        capacity_method: CapacityMethod | int = CapacityMethod.DOUBLE,
    ) -> None:
        self._capacity = self._checked_capacity(capacity)
        self._method = CapacityMethod(capacity_method)
        self._items: list[Any] = []

    @staticmethod
    def _checked_capacity(capacity: int) -> int:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity > _UINT32_MAX:
            raise OverflowError("Exceeded max vector capacity")
        return int(capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        try:
            return self._items[index]
        except IndexError:
            raise IndexError("Index out of range") from None

    def __setitem__(self, index: int, value: Any) -> None:
        try:
            self._items[index] = value
        except IndexError:
            raise IndexError("Index out of range") from None

    def __copy__(self) -> "Vector":
        clone = Vector(self._capacity, self._method)
        clone._items = list(self._items)
        return clone

    def capacity(self) -> int:
        """Return the number of slots reserved."""
        return self._capacity

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("Vector is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("Vector is empty")
        return self._items[-1]

    def _grow(self) -> None:
        if self._method is CapacityMethod.LOG:
            step = int(math.log2(self._capacity)) if self._capacity > 0 else 0
            new_capacity = self._capacity + max(step, 1)
        else:
            new_capacity = 1 if self._capacity == 0 else self._capacity * 2
        if self._capacity > _UINT32_MAX // 2:
            raise OverflowError("Exceeded max vector capacity")
        self.reserve(new_capacity)

    def push_back(self, value: Any) -> None:
        """Append ``value``, growing the capacity when full."""
        if len(self._items) >= self._capacity:
            self._grow()
        self._items.append(value)

    def emplace_back(self, factory: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Build an element with ``factory(*args, **kwargs)``, append it and return it."""
        value = factory(*args, **kwargs)
        self.push_back(value)
        return value

    def pop_back(self) -> None:
        """Drop the last element; does nothing when empty."""
        if self._items:
            self._items.pop()

    def erase(self, index: int) -> None:
        """Remove the element at ``index``, shifting later ones down."""
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")
        del self._items[index]

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def swap(self, other: "Vector") -> None:
        """Exchange contents, capacity and growth policy with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity
        self._method, other._method = other._method, self._method

    def reserve(self, new_capacity: int) -> None:
        """Raise the capacity to ``new_capacity`` if it is larger."""
        new_capacity = self._checked_capacity(new_capacity)
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current size."""
        if len(self._items) < self._capacity:
            self._capacity = len(self._items)

    def average(self) -> float:
        """Return the arithmetic mean of the elements."""
        if not self._items:
            raise ValueError("Cannot compute average of an empty vector")
        return math.fsum(self._items) / len(self._items)

    def median(self) -> float:
        """Return the median of the elements."""
        if not self._items:
            raise ValueError("Cannot compute median of an empty vector")
        ordered = sorted(self._items)
        middle = len(ordered) // 2
        if len(ordered) % 2 == 0:
            return (ordered[middle - 1] + ordered[middle]) / 2.0
        return float(ordered[middle])