"""FIFO queue, LIFO stack and a min-priority queue with decrease-key."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


class Queue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def front(self) -> int:
        """Return the value at the front without removing it."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the value on top of the stack without removing it."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Entry:
    value: int
    priority: int


class PriorityQueue:
    """Binary min-heap keyed on priority, supporting decrease-key."""

    def __init__(self) -> None:
        self._heap: list[_Entry] = []

    def enqueue(self, value: int, priority: int) -> None:
        """Insert ``value`` with the given ``priority``."""
        self._heap.append(_Entry(value, priority))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> int:
        """Remove and return the value with the smallest priority."""
        if not self._heap:
            raise IndexError("Queue is empty")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.value

    def decrease_key(self, value: int, new_priority: int) -> None:
        """Lower the priority of ``value``; a higher priority is ignored."""
        index = self._find_index(value)
        if index is None:
            raise ValueError("Value not found")
        entry = self._heap[index]
        if new_priority >= entry.priority:
            return
        entry.priority = new_priority
        self._sift_up(index)

    def __contains__(self, value: object) -> bool:
        return self._find_index(value) is not None

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def _find_index(self, value: object) -> int | None:
        return next(
            (i for i, entry in enumerate(self._heap) if entry.value == value),
            None,
        )

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left].priority < heap[smallest].priority:
                smallest = left
            if right < size and heap[right].priority < heap[smallest].priority:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest