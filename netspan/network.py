"""An undirected network of computers joined by priced connections."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable


class InvalidInputError(ValueError):
    """Raised when a computer number, a price or a size is out of range."""


@dataclass(frozen=True)
class Edge:
    """One end of a connection: the computer reached and the price of the line."""

    neighbor: int
    cost: int


class Network:
    """Adjacency lists for ``size`` computers, each list kept sorted by neighbor."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise InvalidInputError("Invalid Input")
        self._adjacency: list[list[Edge]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check_computer(self, computer: int) -> None:
        if not 0 <= computer < len(self._adjacency):
            raise InvalidInputError("Invalid input.")

    def _insert(self, computer: int, edge: Edge) -> None:
        bisect.insort(self._adjacency[computer], edge, key=lambda e: e.neighbor)

    def add_connection(self, a: int, b: int, cost: int) -> None:
        """Connect computers ``a`` and ``b`` in both directions at ``cost``."""
        self._check_computer(a)
        self._check_computer(b)
        if cost < 0:
            raise InvalidInputError("Invalid input.")
        self._insert(a, Edge(b, cost))
        self._insert(b, Edge(a, cost))

    def neighbors(self, computer: int) -> tuple[Edge, ...]:
        """The connections of ``computer``, ordered by neighbor number."""
        self._check_computer(computer)
        return tuple(self._adjacency[computer])


def build_net(n: int, connections: Iterable[tuple[int, int, int]]) -> Network:
    """Build a network of ``n`` computers from ``(a, b, price)`` triples."""
    network = Network(n)
    for a, b, price in connections:
        network.add_connection(a, b, price)
    return network