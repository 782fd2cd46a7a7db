# warzone

Building blocks for a Warzone-style turn-based strategy game.

- `warzone.orders`: the order kinds `DeployOrder`, `Advance`, `Bomb`,
  `Airlift` and `Negotiate` (all subclasses of `Order`, each with
  `army_units`, `source` and `target`), and `OrderList`, an ordered list of
  orders with `add`, `remove` and `move`.
- `warzone.player`: `Player`, with a name, territories to defend and to
  attack, a hand of cards and an `OrderList`; and `create_order`, which builds
  an order from a type name.
- `warzone.engine`: `GameEngine`, which moves through the game's `Phase`s in
  response to text commands.
- `warzone.drivers`: the interactive console menus behind the `warzone`
  command.

## Installation

```
pip install .
```

## Command line

```
warzone
```

This opens a menu read from standard input:

1. Map: does nothing and shows the menu again.
2. Player: a submenu for a player named "Player 1" that prints the player,
   lists the territories to attack or defend, or issues a deploy order of 3
   units from "Base" to "Frontline".
3. Orders List: prints a short demonstration of moving an order within an
   order list and of a player issuing one order of each type.
4. Cards deck/hand: does nothing and shows the menu again.
5. Game Engine: reads commands and reports each phase change. The program
   stops when the `end` command is given in the win phase, or when input runs
   out.

The game engine accepts these commands:

| Phase                | Command           | Next phase           |
|----------------------|-------------------|----------------------|
| Start                | `loadmap`         | Map Loaded           |
| Map Loaded           | `loadmap`         | Map Loaded           |
| Map Loaded           | `validatemap`     | Map Validated        |
| Map Validated        | `addplayer`       | Players Added        |
| Players Added        | `addplayer`       | Players Added        |
| Players Added        | `assigncountries` | Assign Reinforcement |
| Assign Reinforcement | `issueorder`      | Issue Orders         |
| Issue Orders         | `issueorder`      | Issue Orders         |
| Issue Orders         | `endissueorders`  | Execute Orders       |
| Execute Orders       | `execorder`       | Execute Orders       |
| Execute Orders       | `endexecorders`   | Assign Reinforcement |
| Execute Orders       | `win`             | Win                  |
| Win                  | `play`            | Start                |
| Win                  | `end`             | End                  |

## Library use

```python
from warzone.orders import Advance, Bomb, OrderList
from warzone.player import Player
from warzone.engine import GameEngine

orders = OrderList([Advance(50, "Qatar", "Poland"), Bomb(100, "Japan", "USA")])
orders.move(Bomb(100, "Japan", "USA"), 0)   # the bomb is now first

player = Player("Umer")
player.issue_order(5, "India", "China", "deploy")
print(player)

engine = GameEngine()
engine.transition("loadmap")
engine.transition("validatemap")
print(engine.valid_commands())   # ('addplayer',)
```

Orders are matched by kind and by their three fields, so `remove` and `move`
act on the first order in the list that equals the one given.

Errors:

- `GameEngine.transition` raises `InvalidCommandError` for a command the
  current phase does not accept; the phase is left unchanged.
- `OrderList.remove` and `OrderList.move` raise `OrderNotFoundError` when no
  order in the list matches; `move` raises `IndexError` for a target position
  outside the list.
- `create_order` and `Player.issue_order` raise `InvalidOrderTypeError` for a
  type other than `"deploy"`, `"advance"`, `"bomb"` or `"airlift"`.
  `Negotiate` orders can be built directly but not issued by type name.

## What this package does not do

There is no map: `loadmap` and `validatemap` only change the engine's phase,
and nothing is read from a file. Commands never change players or orders;
orders are never validated or executed. A player's territories and cards are
fixed lists of names, and there is no card deck. The "Map" and
"Cards deck/hand" menu entries do nothing.

## Running the tests

```
pip install .[test]
pytest
```