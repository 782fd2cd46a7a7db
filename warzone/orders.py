"""Orders a player can issue, and the ordered list that holds them."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar, overload


@dataclass
class Order:
    """A generic order moving army units from one territory to another."""

    army_units: int = 0
    source: str = ""
    target: str = ""

    title: ClassVar[str] = ""
    rule_width: ClassVar[int] = 0

    def matches(self, other: Order) -> bool:
        """Return True if ``other`` is the same kind of order with the same details."""
        return (
            type(self) is type(other)
            and self.army_units == other.army_units
            and self.source == other.source
            and self.target == other.target
        )

    def copy(self) -> Order:
        """Return an independent copy of this order, keeping its kind."""
        return dataclasses.replace(self)

    def _details(self) -> str:
        return (
            f"Number of Army Units:{self.army_units}\n"
            f" Source Territory:{self.source}\n"
            f" Target Territory:{self.target}\n"
        )

    def __str__(self) -> str:
        if not self.title:
            return self._details()
        header = f"{self.title} ORDER IN EXECUTION\n{'-' * self.rule_width}\n"
        return header + self._details()


@dataclass
class DeployOrder(Order):
    """Place army units on a territory."""

    title: ClassVar[str] = "DEPLOY"
    rule_width: ClassVar[int] = 46


@dataclass
class Negotiate(Order):
    """Agree a truce with another player."""

    title: ClassVar[str] = "NEGOTIATE"
    rule_width: ClassVar[int] = 49


@dataclass
class Bomb(Order):
    """Bomb an enemy territory."""

    title: ClassVar[str] = "BOMB"
    rule_width: ClassVar[int] = 47


@dataclass
class Airlift(Order):
    """Fly army units between any two owned territories."""

    title: ClassVar[str] = "AIRLIFT"
    rule_width: ClassVar[int] = 52


@dataclass
class Advance(Order):
    """Move army units to an adjacent territory."""

    title: ClassVar[str] = "ADVANCE"
    rule_width: ClassVar[int] = 48


class OrderNotFoundError(LookupError):
    """Raised when an order is not in an order list."""

    def __init__(self, order: Order) -> None:
        super().__init__(f"no such order in the list: {order!r}")
        self.order = order


class OrderList:
    """An ordered sequence of orders that can be removed and reordered."""

    def __init__(self, orders: Iterable[Order] | None = None) -> None:
        self._orders: list[Order] = list(orders) if orders is not None else []

    def add(self, order: Order) -> None:
        """Append an order to the end of the list."""
        self._orders.append(order)

    def _position(self, order: Order) -> int:
        for position, candidate in enumerate(self._orders):
            if candidate.matches(order):
                return position
        raise OrderNotFoundError(order)

    def remove(self, order: Order) -> Order:
        """Remove the first order matching ``order`` and return it."""
        return self._orders.pop(self._position(order))

    def move(self, order: Order, index: int) -> None:
        """Move the first order matching ``order`` to position ``index``."""
        position = self._position(order)
        if not 0 <= index < len(self._orders):
            raise IndexError(f"index {index} out of range for {len(self._orders)} orders")
        moved = self._orders.pop(position)
        self._orders.insert(index, moved)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    @overload
    def __getitem__(self, index: int) -> Order: ...

    @overload
    def __getitem__(self, index: slice) -> list[Order]: ...

    def __getitem__(self, index: int | slice) -> Order | list[Order]:
        return self._orders[index]

    def __repr__(self) -> str:
        return f"OrderList({self._orders!r})"