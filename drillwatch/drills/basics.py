"""Basic drills: small functions, conditionals and string handling."""

from __future__ import annotations


def is_even(num: int) -> bool:
    """True when the number is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """The string with more UTF-8 bytes; the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y