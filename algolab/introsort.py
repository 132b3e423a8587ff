"""Introsort: quicksort that falls back to heapsort and insertion sort."""

from __future__ import annotations

import math
from typing import Any, MutableSequence

__all__ = ["insertion_sort", "intro_sort"]

_SIZE_THRESHOLD = 16


def insertion_sort(arr: MutableSequence[Any], low: int, high: int) -> None:
    """Sort the inclusive range ``arr[low..high]`` in place by insertion."""
    for i in range(low + 1, high + 1):
        key = arr[i]
        j = i - 1
        while j >= low and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def _median_of_three(arr: MutableSequence[Any], low: int, high: int) -> int:
    mid = low + (high - low) // 2
    if arr[high] < arr[low]:
        arr[low], arr[high] = arr[high], arr[low]
    if arr[mid] < arr[low]:
        arr[mid], arr[low] = arr[low], arr[mid]
    if arr[high] < arr[mid]:
        arr[high], arr[mid] = arr[mid], arr[high]
    arr[mid], arr[high - 1] = arr[high - 1], arr[mid]
    return high - 1


def _partition(arr: MutableSequence[Any], low: int, high: int) -> int:
    pivot_index = _median_of_three(arr, low, high)
    pivot = arr[pivot_index]
    i = low
    j = high - 1
    while True:
        i += 1
        while arr[i] < pivot:
            i += 1
        j -= 1
        while arr[j] > pivot:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
        else:
            break
    arr[i], arr[high - 1] = arr[high - 1], arr[i]
    return i


def _sift_down(arr: MutableSequence[Any], base: int, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and arr[base + largest] < arr[base + left]:
            largest = left
        if right < size and arr[base + largest] < arr[base + right]:
            largest = right
        if largest == root:
            return
        arr[base + root], arr[base + largest] = arr[base + largest], arr[base + root]
        root = largest


def _heap_sort(arr: MutableSequence[Any], low: int, high: int) -> None:
    size = high - low + 1
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(arr, low, size, i)
    for end in range(size - 1, 0, -1):
        arr[low], arr[low + end] = arr[low + end], arr[low]
        _sift_down(arr, low, end, 0)


def _introsort(arr: MutableSequence[Any], low: int, high: int, depth_limit: int) -> None:
    if high - low <= _SIZE_THRESHOLD:
        insertion_sort(arr, low, high)
        return
    if depth_limit == 0:
        _heap_sort(arr, low, high)
        return
    pivot_index = _partition(arr, low, high)
    _introsort(arr, low, pivot_index - 1, depth_limit - 1)
    _introsort(arr, pivot_index + 1, high, depth_limit - 1)


def intro_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place with introsort."""
    n = len(arr)
    if n == 0:
        return
    depth_limit = 2 * int(math.log2(n))
    _introsort(arr, 0, n - 1, depth_limit)