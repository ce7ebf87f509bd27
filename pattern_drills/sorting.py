"""Simple sorting algorithms and list printing helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "selection_sort", "reversed_items", "format_items"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted ascending by repeated adjacent swaps."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for k in range(size - done - 1):
            if items[k] > items[k + 1]:
                items[k], items[k + 1] = items[k + 1], items[k]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted ascending by selecting each minimum in turn."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        min_index = min(range(i, size), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items


def reversed_items(values: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order."""
    return list(values)[::-1]


def format_items(values: Iterable[Any]) -> str:
    """Render the items on one line, each followed by a single space."""
    return "".join(f"{value} " for value in values)