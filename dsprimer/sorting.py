"""In-place sorting algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence


def _partition(array: MutableSequence[int], low: int, high: int) -> int:
    pivot = array[low]
    left, right = low, high
    while left < right:
        while left < right and array[right] >= pivot:
            right -= 1
        array[left] = array[right]
        while left < right and array[left] <= pivot:
            left += 1
        array[right] = array[left]
    array[left] = pivot
    return left


def quick(array: MutableSequence[int], low: int, high: int) -> None:
    """Sort ``array[low:high + 1]`` in place with quick sort (``high`` inclusive)."""
    while low < high:
        pivot = _partition(array, low, high)
        # Recurse into the smaller side to bound the recursion depth.
        if pivot - low < high - pivot:
            quick(array, low, max(pivot - 1, 0))
            low = pivot + 1
        else:
            quick(array, pivot + 1, high)
            high = max(pivot - 1, 0)