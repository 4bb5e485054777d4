"""Array-backed stack and deque-backed queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack; iteration runs from the bottom to the top."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def to_list(self) -> List[T]:
        """Return a copy of the contents, bottom first."""
        return list(self._items)


class Queue(Generic[T]):
    """FIFO queue; iteration runs from the front to the back."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]