"""A stack with constant-time access to its middle, and a palindrome check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False)
class _Cell:
    data: Any
    above: _Cell | None = None
    below: _Cell | None = None


class MiddleStack:
    """A stack on a doubly linked list that tracks its middle element.

    The middle is the ``ceil(n / 2)``-th element counted from the top.
    """

    def __init__(self) -> None:
        self._top: _Cell | None = None
        self._mid: _Cell | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        cell = self._top
        while cell is not None:
            yield cell.data
            cell = cell.below

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        cell = _Cell(data)
        if self._top is None:
            self._top = self._mid = cell
            self._count = 1
            return
        cell.below = self._top
        self._top.above = cell
        self._top = cell
        self._count += 1
        if self._count % 2 == 0:
            self._mid = self._mid.above

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        cell = self._top
        self._top = cell.below
        if self._top is not None:
            self._top.above = None
        self._count -= 1
        if self._count == 0:
            self._mid = None
        elif self._count % 2 != 0:
            self._mid = self._mid.below
        return cell.data

    def find_middle(self) -> Any:
        """Return the middle value."""
        if self._mid is None:
            raise IndexError("middle of empty stack")
        return self._mid.data

    def delete_middle(self) -> Any:
        """Remove and return the middle value."""
        cell = self._mid
        if cell is None:
            raise IndexError("delete from empty stack")
        if cell.above is not None:
            cell.above.below = cell.below
        else:
            self._top = cell.below
        if cell.below is not None:
            cell.below.above = cell.above
        self._count -= 1
        self._mid = cell.below if self._count % 2 != 0 else cell.above
        return cell.data


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    stack = list(text)
    return all(char == stack.pop() for char in text)