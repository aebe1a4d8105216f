"""Mapping drills: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255
_DIGITS = re.compile(r"\+?[0-9]+")


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "papaya": 2, "grapes": 1}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add eight of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 8)


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _add_u8(self.goals_scored, scored)
        self.goals_conceded = _add_u8(self.goals_conceded, conceded)


def _parse_u8(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    number = int(text)
    if number > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return number


def _add_u8(total: int, extra: int) -> int:
    result = total + extra
    if result > _U8_MAX:
        raise OverflowError("goal tally does not fit in 0..=255")
    return result


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_u8(fields[2]), _parse_u8(fields[3])
        scores.setdefault(team_1, Team(team_1)).record(goals_1, goals_2)
        scores.setdefault(team_2, Team(team_2)).record(goals_2, goals_1)
    return scores