from __future__ import annotations

from functools import partial
from typing import Iterable, List

from connect4.ai.computer import ComputerPlayer

from .league_types import Team


def _team(depth: int) -> Team:
    name = f"Computer d{depth}"
    return Team(name, depth, partial(ComputerPlayer, name=name, depth=depth))


def build_roster(depths: Iterable[int] = (1, 2, 3, 4, 5)) -> List[Team]:
    return [_team(d) for d in sorted(set(depths))]
