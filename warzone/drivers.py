"""Interactive console drivers for the game engine, players and order lists."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

from .engine import CHANGE_MESSAGES, GameEngine, InvalidCommandError, Phase
from .orders import Advance, Bomb, Order, OrderList
from .player import InvalidOrderTypeError, Player

_RULE = "\n===============================\n\n"


class _TokenReader:
    """Reads whitespace-separated words from a text stream, one at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_int(self) -> int | None:
        """Return the next word as an int, -1 if it is not a number, None at end of input."""
        token = self.next_token()
        if token is None:
            return None
        try:
            return int(token)
        except ValueError:
            return -1


def _reader(stdin: TextIO | _TokenReader | None) -> _TokenReader:
    if isinstance(stdin, _TokenReader):
        return stdin
    return _TokenReader(sys.stdin if stdin is None else stdin)


def _issue(player: Player, army_units: int, source: str, target: str,
           order_type: str, out: TextIO) -> None:
    out.write(f"Issuing Order of type: {order_type}\n")
    try:
        player.issue_order(army_units, source, target, order_type)
    except InvalidOrderTypeError as error:
        out.write(f"{error}\n")
        return
    out.write("Order successfully created and added to list.\n")


def _plain(order: Order) -> str:
    return str(Order(order.army_units, order.source, order.target))


def test_game_states(stdin=None, stdout=None) -> GameEngine:
    """Read commands and drive the game engine until the game ends or input runs out."""
    reader = _reader(stdin)
    out = sys.stdout if stdout is None else stdout
    engine = GameEngine()
    while True:
        out.write("Enter a command: ")
        command = reader.next_token()
        if command is None:
            return engine
        try:
            phase = engine.transition(command)
        except InvalidCommandError as error:
            out.write(f"{error}\n")
            continue
        out.write(f"{CHANGE_MESSAGES[phase]}\n")
        if phase is Phase.END:
            return engine


def test_players(player=None, stdin=None, stdout=None) -> Player:
    """Announce the player and run the player menu."""
    out = sys.stdout if stdout is None else stdout
    if player is None:
        player = Player("Player 1")
    out.write("========== Testing Players ==========\n")
    out.write(f"{player.name} created\n")
    player_menu(player, stdin, out)
    return player


def player_menu(player, stdin=None, stdout=None) -> None:
    """Let the user print, inspect and give orders to a player until they exit."""
    reader = _reader(stdin)
    out = sys.stdout if stdout is None else stdout
    out.write("Player Menu\n")
    while True:
        out.write(
            "1. Print Player\n"
            "2. Test Attacking\n"
            "3. Test Defending\n"
            "4. Test Orders\n"
            "5. Exit Player Menu\n\n"
        )
        choice = reader.next_int()
        if choice is None:
            return
        if choice == 1:
            out.write("\n========== Printing Player Information ===========\n\n")
            out.write(f"{player}\n")
        elif choice == 2:
            out.write("\n========== Testing Attacking ===========\n\n")
            out.write(f"{player.name}'s Territories to Attack: \n")
            out.writelines(f"{territory} \n" for territory in player.to_attack())
        elif choice == 3:
            out.write("\n========== Testing Defending ===========\n\n")
            out.write(f"{player.name}'s Territories to Defend: \n")
            out.writelines(f"{territory} \n" for territory in player.to_defend())
        elif choice == 4:
            out.write("\n========== Testing Orders ===========\n\n")
            _issue(player, 3, "Base", "Frontline", "deploy", out)
            out.write(f"{player.name}'s Order added \n")
            out.write("Print Player's Information to view all orders\n")
        elif choice == 5:
            out.write("\n========== Exiting Player Menu ===========\n\n")
            out.write(_RULE)
            return
        else:
            out.write("Invalid choice\n")
        out.write(_RULE)


def test_order_list(stdout=None) -> tuple[OrderList, Player]:
    """Show an order list being reordered and a player issuing each kind of order."""
    out = sys.stdout if stdout is None else stdout
    advance = Advance(50, "Qatar", "Poland")
    bomb = Bomb(100, "Japan", "USA")
    bomb2 = Bomb(200, "Kenya", "Nigeria")
    out.write(str(advance))
    out.write(str(bomb))
    out.write(str(bomb2))

    orders = OrderList(order.copy() for order in (advance, bomb, bomb2))
    out.write("BEFORE REMOVE\n")
    for order in orders:
        out.write(f"{_plain(order)}\n")

    orders.move(bomb2, 0)
    out.write("AFTER REMOVE\n")
    for order in orders:
        out.write(f"{_plain(order)}\n")

    player = Player("Umer")
    _issue(player, 5, "India", "China", "deploy", out)
    _issue(player, 10, "USA", "Canada", "advance", out)
    _issue(player, 3, "Germany", "Poland", "bomb", out)
    _issue(player, 8, "France", "Italy", "airlift", out)
    out.write(f"{player}\n")
    return orders, player


def main(argv=None) -> int:
    """Run the top-level menu for trying out each part of the game."""
    parser = argparse.ArgumentParser(
        prog="warzone", description="Try out the parts of the game interactively."
    )
    parser.parse_args(argv)

    reader = _TokenReader(sys.stdin)
    out = sys.stdout
    player = Player("Player 1")
    while True:
        out.write(
            "Choose which part to test: \n"
            "1. Map\n"
            "2. Player\n"
            "3. Orders List\n"
            "4. Cards deck/hand\n"
            "5. Game Engine (will end the program)\n"
        )
        choice = reader.next_int()
        if choice is None:
            return 0
        if choice in (1, 4):
            continue
        if choice == 2:
            test_players(player, reader, out)
        elif choice == 3:
            test_order_list(out)
        elif choice == 5:
            test_game_states(reader, out)
            return 0
        else:
            out.write("Invalid option, try again\n")


if __name__ == "__main__":
    sys.exit(main())