"""A binary max-heap stored in a list."""

from __future__ import annotations

from typing import Any


def _parent(index: int) -> int:
    return (index - 1) // 2


def _children(index: int) -> tuple[int, int]:
    return 2 * index + 1, 2 * index + 2


class MaxHeap:
    """A priority queue whose top is always its largest item."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: Any) -> None:
        """Add item to the heap."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def top(self) -> Any:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the largest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        largest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return largest

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index and items[index] > items[_parent(index)]:
            parent = _parent(index)
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        while True:
            largest = index
            for child in _children(index):
                if child < len(items) and items[largest] < items[child]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest