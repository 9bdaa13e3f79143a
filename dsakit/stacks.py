"""Stack implementations and stack-based algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 100


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class MinStack:
    """An integer stack that reports its minimum in constant time and space.

    Values pushed at or below the current minimum are stored encoded as
    ``2 * value - previous_minimum`` so the previous minimum can be recovered.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._min: int | None = None

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if not self._items:
            self._min = value
            self._items.append(value)
        elif value > self._min:
            self._items.append(value)
        else:
            self._items.append(2 * value - self._min)
            self._min = value

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        stored = self._items.pop()
        if stored < self._min:
            value = self._min
            self._min = 2 * self._min - stored
            return value
        return stored

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        stored = self._items[-1]
        return self._min if stored < self._min else stored

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._min


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """A stack kept as a chain of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("top of empty stack")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top down."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next


class QueueStack:
    """A stack built on a single first-in first-out queue."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        waiting = len(self._queue)
        self._queue.append(value)
        for _ in range(waiting):
            self._queue.append(self._queue.popleft())

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)


def _truncating_div(x: int, y: int) -> int:
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


_OPERATORS = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        operation = _OPERATORS.get(token)
        if operation is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        y = stack.pop()
        x = stack.pop()
        stack.append(operation(x, y))
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]


_PAIRS = {")": "(", "}": "{", "]": "["}


def is_valid_parentheses(text: str) -> bool:
    """Tell whether the brackets in ``text`` are balanced and properly nested.

    Any character that is not an opening bracket must close the innermost open one.
    """
    stack: list[str] = []
    for ch in text:
        if ch in "({[":
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack