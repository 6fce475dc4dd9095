# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Side = Literal[0, 1]
Cell = Optional[Side]
Move = NewType("Move", int)   # column index 0..6


def other(side: Side) -> Side:
    return 1 if side == 0 else 0
