"""Classic comparison sorts that reorder a list in place, plus a random data helper."""

from __future__ import annotations

import heapq
import random
from typing import Any, MutableSequence, Union

Number = Union[int, float]

__all__ = [
    "generate_random_numbers",
    "bubble_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_real(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


def generate_random_numbers(num: int, minimum: Number, maximum: Number) -> list[Number]:
    """Return ``num`` random numbers drawn uniformly from the given range.

    Integer bounds give integers in ``[minimum, maximum]``; floating-point
    bounds give floats in ``[minimum, maximum)``.
    """
    if not (_is_real(minimum) and _is_real(maximum)):
        raise TypeError("bounds must be numeric")
    if num < 0:
        raise ValueError("num must not be negative")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")

    rng = random.Random()
    if _is_int(minimum) and _is_int(maximum):
        return [rng.randint(minimum, maximum) for _ in range(num)]

    low, high = float(minimum), float(maximum)
    span = high - low
    return [low + span * rng.random() for _ in range(num)]


def bubble_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by repeatedly swapping adjacent out-of-order items."""
    n = len(arr)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def selection_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place by selecting the minimum of the unsorted tail."""
    n = len(arr)
    for i in range(n - 1):
        min_index = min(range(i, n), key=arr.__getitem__)
        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]


def _merge_sorted_halves(arr: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    left_half = arr[left : mid + 1]
    right_half = arr[mid + 1 : right + 1]
    # heapq.merge takes from the left run on ties, keeping the sort stable.
    arr[left : right + 1] = list(heapq.merge(left_half, right_half))


def _merge_sort(arr: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(arr, left, mid)
    _merge_sort(arr, mid + 1, right)
    _merge_sorted_halves(arr, left, mid, right)


def merge_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with a stable top-down merge sort."""
    _merge_sort(arr, 0, len(arr) - 1)


def _partition(arr: MutableSequence[Any], low: int, high: int) -> int:
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def _quick_sort(arr: MutableSequence[Any], low: int, high: int) -> None:
    # Recurse into the smaller side and loop over the larger one so the
    # call depth stays logarithmic even for already ordered input.
    while low < high:
        pivot_index = _partition(arr, low, high)
        if pivot_index - low < high - pivot_index:
            _quick_sort(arr, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            _quick_sort(arr, pivot_index + 1, high)
            high = pivot_index - 1


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with quicksort using the last element as pivot."""
    if arr:
        _quick_sort(arr, 0, len(arr) - 1)


def _sift_down(arr: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and arr[left] > arr[largest]:
            largest = left
        if right < size and arr[right] > arr[largest]:
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place using a binary max-heap."""
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(arr, n, i)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)