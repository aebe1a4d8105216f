"""Trait drills: appending "Bar", default licensing info and combined capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    for item in (software, software_two):
        if not isinstance(item, Licensed):
            raise TypeError(f"{type(item).__name__} is not Licensed")
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """First capability."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Second capability."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both capabilities."""


class OtherStruct(SomeTrait, OtherTrait):
    """Also has both capabilities."""


def some_func(item: SomeTrait) -> bool:
    """Use both capabilities of an item that has them."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()