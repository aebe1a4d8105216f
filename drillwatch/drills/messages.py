"""Message drills: a small state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on a byte-sized grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change to an RGB colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    """Ask to stop."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """Colour, position and quit flag changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Dispatch a message to the matching action."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")