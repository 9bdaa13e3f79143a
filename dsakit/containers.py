"""Simple record types and a growable array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Product:
    """A product on sale."""

    name: str
    price: float
    quantity: int


@dataclass
class Student:
    """A student record."""

    name: str
    roll_no: int
    cgpa: float


class DynamicArray:
    """An array that doubles its capacity whenever it runs out of room."""

    def __init__(self) -> None:
        self._slots: list[Any] = [None]
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of elements that fit before the array grows again."""
        return len(self._slots)

    def add(self, element: Any) -> None:
        """Append ``element``, doubling the capacity when full."""
        if self._size == len(self._slots):
            self._slots.extend([None] * len(self._slots))
        self._slots[self._size] = element
        self._size += 1

    def remove(self) -> Any:
        """Remove and return the last element."""
        if self._size == 0:
            raise IndexError("remove from empty array")
        self._size -= 1
        element = self._slots[self._size]
        self._slots[self._size] = None
        return element

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        return self._slots[index]

    def __len__(self) -> int:
        return self._size