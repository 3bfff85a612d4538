"""A linked stack, a queue built from two stacks, and small list helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass
class _StackNode:
    data: int
    next: Optional[_StackNode] = None


class Stack:
    """A last-in, first-out stack kept as a chain of nodes."""

    def __init__(self) -> None:
        self._top: Optional[_StackNode] = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _StackNode(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value.

        Raises IndexError on an empty stack.
        """
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> int:
        """Return the top value without removing it.

        Raises IndexError on an empty stack.
        """
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next


class QueueUsingStacks:
    """A first-in, first-out queue built from two stacks.

    Enqueue is O(1); dequeue is amortised O(1), since every element moves
    from the inbox to the outbox at most once.
    """

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        self._inbox.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value.

        Raises IndexError on an empty queue.
        """
        if not self._outbox:
            if not self._inbox:
                raise IndexError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def calculate_mean(data: Sequence[float]) -> float:
    """Arithmetic mean of ``data``; 0.0 when it is empty."""
    if not data:
        return 0.0
    return sum(data, 0.0) / len(data)


def format_data(data: Iterable[float]) -> str:
    """Render values as ``"Data: "`` followed by each value and a space."""
    return "Data: " + "".join(f"{value:g} " for value in data)