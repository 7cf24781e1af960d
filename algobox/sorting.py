"""Classic comparison and counting sorts, a binary max-heap and quickselect."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeatedly swapping adjacent pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted by counting occurrences."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by inserting each into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i
        while j > 0 and current < result[j - 1]:
            result[j] = result[j - 1]
            j -= 1
        result[j] = current
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeatedly selecting the minimum."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _sift_down(heap: MutableSequence[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[largest] < heap[left]:
            largest = left
        if right < size and heap[largest] < heap[right]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def _sift_up(heap: MutableSequence[Any], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not heap[parent] < heap[index]:
            return
        heap[parent], heap[index] = heap[index], heap[parent]
        index = parent


def _build_heap(heap: MutableSequence[Any]) -> None:
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted with an in-place max-heap."""
    result = list(items)
    _build_heap(result)
    for end in range(len(result) - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


class MaxHeap:
    """A binary max-heap kept in a list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        _build_heap(self._items)

    def push(self, value: Any) -> None:
        """Add a value."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0)
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``items[left:right + 1]`` in place around ``items[left]``.

    Returns the pivot's final index: everything before it is no larger and
    everything after it is no smaller.
    """
    if not 0 <= left <= right < len(items):
        raise IndexError("partition bounds out of range")
    pivot = items[left]
    i, j = left, right
    while i < j:
        while i < j and items[j] >= pivot:
            j -= 1
        while i < j and items[i] <= pivot:
            i += 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[left] = items[i]
    items[i] = pivot
    return i


def quick_select(items: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th smallest item (1-based) without fully sorting."""
    values = list(items)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    target = k - 1
    left, right = 0, len(values) - 1
    while left < right:
        pivot = partition(values, left, right)
        if pivot == target:
            return values[pivot]
        if pivot > target:
            right = pivot - 1
        else:
            left = pivot + 1
    return values[left]