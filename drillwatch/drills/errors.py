"""Error-handling drills: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual error messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    limit = 1 << (bits - 1)
    if number >= limit:
        raise ValueError("number too large to fit in target type")
    if number < -limit:
        raise ValueError("number too small to fit in target type")
    return number


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; an empty name is a ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: five per item plus a fee of one."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if they do not suffice."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = auto()
    ZERO = auto()


_DESCRIPTIONS = {
    CreationErrorKind.NEGATIVE: "number is negative",
    CreationErrorKind.ZERO: "number is zero",
}


class CreationError(ValueError):
    """Raised when a value is not positive."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(_DESCRIPTIONS[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero, wrapping either a parse or a creation error."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def creation(self) -> CreationError | None:
        return self.error if isinstance(self.error, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        return None if isinstance(self.error, CreationError) else self.error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and require it to be positive."""
    try:
        number = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err