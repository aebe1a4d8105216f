"""Struct drills: plain records, packages, a generic wrapper and vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar


@dataclass
class ColorClassic:
    """An RGB colour with named fields."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """An RGB colour addressed by position."""

    red: int
    green: int
    blue: int


class UnitLike:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitLike"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLike)

    def __hash__(self) -> int:
        return hash(UnitLike)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def array_and_vec() -> tuple[tuple[int, int, int, int], list[int]]:
    """A fixed array and a list with the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]