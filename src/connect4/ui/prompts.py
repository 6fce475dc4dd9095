from __future__ import annotations
from typing import Callable, Optional

from connect4.types import Move


def parse_move(raw: str, cols: int) -> Optional[Move]:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def ask_int(ask: Callable[[str], str], prompt: str, *, minimum: int = 0) -> int:
    """Keep asking until the answer is an integer >= minimum."""
    while True:
        s = ask(prompt).strip()
        if s.isdigit() and int(s) >= minimum:
            return int(s)
        print(f"Please enter a whole number >= {minimum}.")
