"""Container drills: cons lists, copy-on-write absolute values and optional ice cream."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; the empty list is None."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(4, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values, copying only when something has to change.

    The input itself is returned when it has no negative numbers; otherwise a new
    list is returned and the input is left alone.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour: 5 before 22, 0 until 24, None after."""
    if time_of_day < 0:
        raise ValueError("time of day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None