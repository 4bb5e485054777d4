"""Array-based binary min-heap ordered by a 'less' predicate."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]


class BinaryHeap(Generic[T]):
    """Heap whose top is the element that is least under ``less``."""

    def __init__(self, values: Iterable[T] = (), less: Optional[Less] = None) -> None:
        self._items: List[T] = list(values)
        self._less: Less = less if less is not None else operator.lt
        self.heapify()

    @staticmethod
    def left(i: int) -> int:
        return 2 * i + 1

    @staticmethod
    def right(i: int) -> int:
        return 2 * i + 2

    @staticmethod
    def parent(i: int) -> int:
        return (i - 1) // 2 if i > 0 else 0

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        return not self._items

    def top(self) -> T:
        if not self._items:
            raise IndexError("Heap vacio")
        return self._items[0]

    def data(self) -> List[T]:
        """A copy of the underlying array in heap order."""
        return list(self._items)

    def add(self, value: T) -> bool:
        self._items.append(value)
        self.bubble_up(len(self._items) - 1)
        return True

    def remove(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("Heap vacio")
        out = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self.trickle_down(0)
        return out

    def clear(self) -> None:
        self._items.clear()

    def bubble_up(self, i: int) -> None:
        items = self._items
        while i > 0:
            p = self.parent(i)
            if not self._less(items[i], items[p]):
                break
            items[i], items[p] = items[p], items[i]
            i = p

    def trickle_down(self, i: int) -> None:
        items = self._items
        n = len(items)
        while True:
            best = i
            l, r = self.left(i), self.right(i)
            if l < n and self._less(items[l], items[best]):
                best = l
            if r < n and self._less(items[r], items[best]):
                best = r
            if best == i:
                return
            items[i], items[best] = items[best], items[i]
            i = best

    def heapify(self) -> None:
        for i in reversed(range(len(self._items) // 2)):
            self.trickle_down(i)

    def is_heap(self) -> bool:
        return self.is_heap_array(self._items, self._less)

    @staticmethod
    def is_heap_array(data: Sequence[T], less: Optional[Less] = None) -> bool:
        """True if no child in the array is less than its parent."""
        less = less if less is not None else operator.lt
        n = len(data)
        for i in range(n):
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and less(data[child], data[i]):
                    return False
        return True