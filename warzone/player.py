"""Players, their territories, cards and issued orders."""

from __future__ import annotations

from .orders import Advance, Airlift, Bomb, DeployOrder, Order, OrderList

DEFAULT_NAME = "John Doe"
DEFAULT_DEFEND = ("France", "Canada", "USA")
DEFAULT_ATTACK = ("Russia", "Ukraine", "China")
DEFAULT_CARDS = ("1", "2", "3")

_ORDER_TYPES: dict[str, type[Order]] = {
    "deploy": DeployOrder,
    "advance": Advance,
    "bomb": Bomb,
    "airlift": Airlift,
}


class InvalidOrderTypeError(ValueError):
    """Raised when an order type name is not one a player can issue."""

    def __init__(self, order_type: str) -> None:
        super().__init__(f"Invalid order type: {order_type}")
        self.order_type = order_type


def create_order(order_type: str, army_units: int, source: str, target: str) -> Order:
    """Build an order of the named type ("deploy", "advance", "bomb" or "airlift")."""
    try:
        kind = _ORDER_TYPES[order_type]
    except KeyError:
        raise InvalidOrderTypeError(order_type) from None
    return kind(army_units, source, target)


class Player:
    """A player with territories to defend and attack, cards and a list of orders."""

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        self.name = name
        self.defend_territories: list[str] = list(DEFAULT_DEFEND)
        self.attack_territories: list[str] = list(DEFAULT_ATTACK)
        self.cards: list[str] = list(DEFAULT_CARDS)
        self.orders = OrderList()

    def to_defend(self) -> list[str]:
        """Return the territories this player should defend."""
        return list(self.defend_territories)

    def to_attack(self) -> list[str]:
        """Return the territories this player should attack."""
        return list(self.attack_territories)

    def issue_order(self, army_units: int, source: str, target: str, order_type: str) -> Order:
        """Create an order of the given type, append it to the player's list and return it."""
        order = create_order(order_type, army_units, source, target)
        self.orders.add(order)
        return order

    def copy(self) -> Player:
        """Return a deep copy of this player, orders included."""
        other = Player(self.name)
        other.defend_territories = list(self.defend_territories)
        other.attack_territories = list(self.attack_territories)
        other.cards = list(self.cards)
        other.orders = OrderList(order.copy() for order in self.orders)
        return other

    def __str__(self) -> str:
        parts = ["Player Details:\n", f"Name: {self.name}\n"]
        parts.append("\n-Territories to Defend: \n")
        parts.extend(f"{territory} \n" for territory in self.defend_territories)
        parts.append("\n-Territories to Attack: \n")
        parts.extend(f"{territory} \n" for territory in self.attack_territories)
        parts.append("\n-Cards: \n")
        parts.extend(f"{card} \n" for card in self.cards)
        parts.append("\n-Orders: \n")
        parts.extend(f"{order}\n" for order in self.orders)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, orders={len(self.orders)})"