"""Turn a parent array into adjacency lists of the tree it describes."""

from __future__ import annotations

from typing import Sequence

from netspan.network import InvalidInputError, Network


def build_paths(prim: Sequence[int | None]) -> Network:
    """Build the tree's network, each edge priced 0, from a parent sequence."""
    if not prim:
        raise InvalidInputError("Invalid input")
    paths = Network(len(prim))
    for child, parent in enumerate(prim):
        if parent is not None:
            paths.add_connection(child, parent, 0)
    return paths