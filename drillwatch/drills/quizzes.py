"""Quiz drills: apple pricing, a string-command machine and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when buying more than 40."""
    return quantity if quantity > 40 else quantity * 2


@dataclass(frozen=True)
class Uppercase:
    """Uppercase the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    count: int


Command = Uppercase | Trim | Append


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


G = TypeVar("G")


@dataclass
class ReportCard(Generic[G]):
    """A report card with a numeric or alphabetical grade."""

    grade: G
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"