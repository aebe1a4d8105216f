"""Iterator drills: capitalising words, checked division, factorials and counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum, auto

_I32_MIN = -(2**31)
_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Uppercase the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised when a division does not give a whole number."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a == _I32_MIN and b == -1:
        raise OverflowError("attempt to divide with overflow")
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each sample number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each quotient or error in place."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """The factorial of a non-negative number, limited to the 64-bit unsigned range."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Number of entries in the mapping with the given progress."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Number of entries with the given progress across all mappings."""
    return sum(count_iterator(mapping, value) for mapping in collection)