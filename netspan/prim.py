"""Minimum spanning tree of a network by Prim's algorithm."""

from __future__ import annotations

import math

from netspan.network import InvalidInputError, Network


class NoSpanningTreeError(Exception):
    """Raised when the network is not connected."""


def _delete_min(pending: dict[int, None], best: list[float]) -> int:
    # Ties go to the candidate found last, in candidate order.
    lowest = math.inf
    chosen = next(iter(pending))
    for computer in pending:
        if best[computer] <= lowest:
            lowest = best[computer]
            chosen = computer
    del pending[chosen]
    return chosen


def build_prim_tree(network: Network, start: int = 0) -> list[int | None]:
    """Return the parent of each computer in the tree; the root's parent is None."""
    n = len(network)
    if not 0 <= start < n:
        raise InvalidInputError("Invalid input.")
    best: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    best[start] = 0
    pending: dict[int, None] = dict.fromkeys(range(n))
    in_tree: set[int] = set()

    while pending:
        u = _delete_min(pending, best)
        if best[u] == math.inf:
            raise NoSpanningTreeError("No spanning tree available.")
        in_tree.add(u)
        for edge in network.neighbors(u):
            v = edge.neighbor
            if v not in in_tree and edge.cost < best[v]:
                best[v] = edge.cost
                parent[v] = u
    return parent