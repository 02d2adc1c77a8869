"""A fixed-capacity container and a doubly linked list, each with cursors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Docker(Generic[T]):
    """A container that holds at most ``max_size`` items."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} items")

    def __getitem__(self, index: int) -> T:
        self._check(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check(index)
        self._items[index] = value

    def add_item(self, value: T) -> None:
        """Append ``value``; raise OverflowError when the container is full."""
        if len(self._items) >= self.max_size:
            raise OverflowError(f"docker is full ({self.max_size} items)")
        self._items.append(value)

    def clear(self) -> None:
        self._items.clear()

    def cursor(self, reverse: bool = False) -> DockerCursor[T]:
        """A cursor on the first item, or on the last one when ``reverse``."""
        start = len(self._items) - 1 if reverse else 0
        return DockerCursor(self, start, reverse)


class DockerCursor(Generic[T]):
    """A movable position inside a :class:`Docker`."""

    def __init__(self, docker: Docker[T], index: int, reverse: bool = False) -> None:
        self.docker = docker
        self.index = index
        self.reverse = reverse

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DockerCursor):
            return NotImplemented
        return self.docker is other.docker and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.docker), self.index))

    def next(self) -> None:
        self.index += 1

    def behind(self) -> None:
        self.index -= 1

    def advance(self) -> DockerCursor[T]:
        """Step in the cursor's own direction."""
        if self.reverse:
            self.behind()
        else:
            self.next()
        return self

    def is_done(self) -> bool:
        """True once a reverse cursor passes the front or a forward one the capacity."""
        if self.reverse:
            return self.index == -1
        return self.index >= self.docker.max_size

    @property
    def value(self) -> T:
        return self.docker[self.index]

    def set_value(self, value: T) -> None:
        self.docker[self.index] = value


@dataclass(eq=False)
class _Node:
    value: Any = None
    next: _Node | None = None
    behind: _Node | None = None


class LinkedList(Generic[T]):
    """A doubly linked list with a sentinel head."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head = _Node()
        self._tail = self._head
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not self._head:
            yield node.value
            node = node.behind

    def push_back(self, value: T) -> None:
        node = _Node(value, behind=self._tail)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_back(self) -> T:
        """Remove and return the last value; raise IndexError when empty."""
        if self._tail is self._head:
            raise IndexError("pop from empty list")
        node = self._tail
        self._tail = node.behind
        self._tail.next = None
        self._size -= 1
        return node.value

    def cursor(self, reverse: bool = False) -> ListCursor[T]:
        """A cursor on the first value, or on the last one when ``reverse``."""
        start = self._tail if reverse else self._head.next
        return ListCursor(start, self._head, reverse)


class ListCursor(Generic[T]):
    """A movable position inside a :class:`LinkedList`."""

    def __init__(self, node: _Node | None, head: _Node, reverse: bool = False) -> None:
        self._node = node
        self._head = head
        self.reverse = reverse

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def _current(self) -> _Node:
        if self._node is None:
            raise IndexError("cursor is exhausted")
        return self._node

    def next(self) -> None:
        self._node = self._current().next

    def behind(self) -> None:
        self._node = self._current().behind

    def advance(self) -> ListCursor[T]:
        """Step in the cursor's own direction."""
        if self.reverse:
            self.behind()
        else:
            self.next()
        return self

    def retreat(self) -> ListCursor[T]:
        """Step against the cursor's own direction."""
        if self.reverse:
            self.next()
        else:
            self.behind()
        return self

    def is_done(self) -> bool:
        """True when the cursor has left the stored values."""
        return self._node is None or self._node is self._head

    @property
    def value(self) -> T:
        if self.is_done():
            raise IndexError("cursor is exhausted")
        return self._node.value

    def set_value(self, value: T) -> None:
        if self.is_done():
            raise IndexError("cursor is exhausted")
        self._node.value = value


def find(iterable: Iterable[T], value: Any) -> T:
    """Return the first item equal to ``value``; raise ValueError if there is none."""
    for item in iterable:
        if item == value:
            return item
    raise ValueError(f"{value!r} not found")


def main(argv=None) -> int:
    docker: Docker[int] = Docker(10)
    for value in (1, 2, 3):
        docker.add_item(value)
    for value in docker:
        print(value)

    cursor = docker.cursor(reverse=True)
    while not cursor.is_done():
        print(cursor.value)
        cursor.advance()

    print(f"find {find(docker, 3)}")
    print("-" * 26)

    numbers: LinkedList[int] = LinkedList()
    for value in (1, 2, 3, 4):
        numbers.push_back(value)

    print(f"find {find(numbers, 3)}")
    for value in numbers:
        print(value)

    list_cursor = numbers.cursor(reverse=True)
    while not list_cursor.is_done():
        print(list_cursor.value)
        list_cursor.advance()

    while len(numbers) > 0:
        print(numbers.pop_back())
    return 0