"""A singly linked list of integers with in-place editing operations."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["Node", "Statistics", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: int
    next: Node | None = None


@dataclass(frozen=True)
class Statistics:
    """Summary of the values held in a list."""

    count: int
    total: int
    average: float


class LinkedList:
    """Singly linked list of integers."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self.head: Node | None = None
        for value in values or ():
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("Index out of bounds")

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise ValueError("Invalid index")

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value: int) -> None:
        """Add a value at the end."""
        new = Node(value)
        if self.head is None:
            self.head = new
            return
        *_, last = self._nodes()
        last.next = new

    def prepend(self, value: int) -> None:
        """Add a value at the beginning."""
        self.head = Node(value, self.head)

    def insert_after(self, index: int, value: int) -> None:
        """Insert a value so that it ends up at position ``index``.

        Index 0 inserts at the front; an index equal to the length appends.
        Raises ValueError for a negative index and IndexError past the end.
        """
        self._check_index(index)
        if index == 0:
            self.prepend(value)
            return
        previous = self._node_at(index - 1)
        previous.next = Node(value, previous.next)

    def append_many(self, count: int, value: int) -> None:
        """Append ``value`` ``count`` times."""
        for _ in range(count):
            self.append(value)

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; ValueError if absent."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"Node with data {value} not found")

    def find(self, value: int) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.data == value), None)

    def delete_at(self, index: int) -> None:
        """Delete the node at ``index``."""
        self._check_index(index)
        if index == 0:
            if self.head is None:
                raise IndexError("Index out of bounds")
            self.head = self.head.next
            return
        previous = self._node_at(index - 1)
        if previous.next is None:
            raise IndexError("Index out of bounds")
        previous.next = previous.next.next

    def truncate_after(self, index: int) -> None:
        """Drop every node that follows position ``index``."""
        self._check_index(index)
        self._node_at(index).next = None

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def statistics(self) -> Statistics:
        """Count, sum and average of the values; ValueError when empty."""
        values = list(self)
        if not values:
            raise ValueError("The list is empty. No statistics to display.")
        total = sum(values)
        return Statistics(len(values), total, total / len(values))

    def is_empty(self) -> bool:
        return self.head is None

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.data = value

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value."""
        seen: set[int] = set()
        previous: Node | None = None
        for node in list(self._nodes()):
            if node.data in seen:
                assert previous is not None
                previous.next = node.next
            else:
                seen.add(node.data)
                previous = node

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Append ``count`` random values between 0 and 99."""
        rng = rng or random.Random()
        for _ in range(count):
            self.append(rng.randrange(100))

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def render(self) -> str:
        """Show the list as ``[0]a -> [1]b -> NULL``."""
        cells = "".join(f"[{i}]{value} -> " for i, value in enumerate(self))
        return cells + "NULL"