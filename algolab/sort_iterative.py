"""Quicksort driven by an explicit work stack instead of recursion."""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["quick_sort"]


def _partition(arr: MutableSequence[Any], low: int, high: int) -> int:
    mid = low + (high - low) // 2

    # Move the median of low/mid/high into the pivot slot at ``high``.
    if arr[mid] < arr[low]:
        arr[mid], arr[low] = arr[low], arr[mid]
    if arr[high] < arr[low]:
        arr[high], arr[low] = arr[low], arr[high]
    if arr[mid] < arr[high]:
        arr[mid], arr[high] = arr[high], arr[mid]

    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def quick_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with median-of-three quicksort and no recursion."""
    if not arr:
        return

    stack: list[tuple[int, int]] = [(0, len(arr) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pivot_index = _partition(arr, low, high)
        if pivot_index - 1 > low:
            stack.append((low, pivot_index - 1))
        if pivot_index + 1 < high:
            stack.append((pivot_index + 1, high))