from __future__ import annotations

from typing import Callable

from connect4.ai.base import Player
from connect4.ai.computer import ComputerPlayer
from connect4.game.controller import run_game
from connect4.ui.human import HumanPlayer
from connect4.ui.prompts import ask_int


def make_player(order: str, ask: Callable[[str], str] = input) -> Player:
    """
    Ask for a player's name. Any name containing "Computer" becomes a
    search-based player and is asked for its depth.
    """
    name = ""
    while not name:
        name = ask(f"Enter the name of the {order} player.\n(Write 'Computer' in the name of a computer) ").strip()

    if "Computer" in name:
        depth = ask_int(ask, "Depth of search? ", minimum=0)
        return ComputerPlayer(name=name, depth=depth)
    return HumanPlayer(name=name, ask=ask)


def run_menu(ask: Callable[[str], str] = input) -> None:
    print("Select mode:")
    print("1) Play a game")
    print("2) Run depth league (computer vs computer)")

    choice = ask("Choice: ").strip()

    if choice == "2":
        from connect4.scripts.league_main import main as league_main
        league_main()
        return

    if choice != "1":
        print("\nInvalid choice. Starting a game.\n")

    first = make_player("first", ask)
    second = make_player("second", ask)
    print(f"\nStarting game: {first.name} vs {second.name}\n")
    run_game([first, second])
