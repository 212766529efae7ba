"""Binary min-heap with an identity index for decrease-key.

``heapq`` cannot lower the priority of an element that is already in the
heap; this heap keeps, for every resident element, its slot in the
backing list so the element can be sifted up in place after its
priority was lowered.
"""

from __future__ import annotations

import operator
from typing import Callable, Dict, Generic, Hashable, List, TypeVar

from ..domain.errors import EmptyHeapError, StaleDecreaseKeyError

T = TypeVar("T")


def _self_identity(item: T) -> Hashable:
    return item  # type: ignore[return-value]


class IndexedMinHeap(Generic[T]):
    """Min-heap of items ordered by ``less`` and indexed by ``identity``.

    Args:
        identity: Maps an item to a stable hashable key. Defaults to the
            item itself, which only suits immutable items.
        less: Strict ordering; ``less(a, b)`` is True when ``a`` must be
            extracted before ``b``. Defaults to ``a < b``.

    At most one item per identity may be resident at a time. To lower
    an item's priority, mutate it in place and call ``decrease_key``.

    Example:
        heap = IndexedMinHeap(identity=lambda r: r.node, less=lambda a, b: a.cost < b.cost)
        heap.insert(record)
        record.cost = 3
        heap.decrease_key(record)
    """

    def __init__(
        self,
        identity: Callable[[T], Hashable] = _self_identity,
        less: Callable[[T, T], bool] = operator.lt,
    ) -> None:
        self._identity = identity
        self._less = less
        self._data: List[T] = []
        self._slots: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __contains__(self, key: Hashable) -> bool:
        """Check whether an item with identity ``key`` is resident."""
        return key in self._slots

    def is_empty(self) -> bool:
        return not self._data

    def insert(self, item: T) -> None:
        """Add ``item`` and restore heap order. O(log n)."""
        self._data.append(item)
        index = len(self._data) - 1
        self._slots[self._identity(item)] = index
        self._sift_up(index)

    def peek_min(self) -> T:
        """Return the minimum item without removing it.

        Raises:
            EmptyHeapError: If the heap holds no items.
        """
        if not self._data:
            raise EmptyHeapError("Cannot peek from an empty heap")
        return self._data[0]

    def extract_min(self) -> T:
        """Remove and return the minimum item. O(log n).

        Raises:
            EmptyHeapError: If the heap holds no items.
        """
        if not self._data:
            raise EmptyHeapError("Cannot extract from an empty heap")

        last = len(self._data) - 1
        self._swap(0, last)
        item = self._data.pop()
        del self._slots[self._identity(item)]
        if self._data:
            self._sift_down(0)
        return item

    def decrease_key(self, item: T) -> None:
        """Restore heap order after ``item``'s priority was lowered in place.

        The new priority must not be greater than the old one; this is
        not checked.

        Raises:
            StaleDecreaseKeyError: If no item with this identity is resident.
                The heap is left unchanged.
        """
        key = self._identity(item)
        index = self._slots.get(key)
        if index is None:
            raise StaleDecreaseKeyError(
                f"Item not resident in heap: {key!r}", identity=key
            )
        self._sift_up(index)

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self._slots[self._identity(data[i])] = i
        self._slots[self._identity(data[j])] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(self._data[index], self._data[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index

            if left < size and self._less(self._data[left], self._data[smallest]):
                smallest = left
            if right < size and self._less(self._data[right], self._data[smallest]):
                smallest = right

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
