"""Depth-first search for a path between two computers."""

from __future__ import annotations

from typing import Sequence

from netspan.network import InvalidInputError, Network


def find_path(paths: Network, first: int, last: int) -> list[int] | None:
    """Return the path found from ``first`` to ``last`` by depth-first search, or None."""
    n = len(paths)
    if not (0 <= first < n and 0 <= last < n):
        raise InvalidInputError("Invalid input.")
    if first == last:
        return [first]

    visited = {first}
    parent: dict[int, int] = {}
    stack = [iter(paths.neighbors(first))]
    current = [first]
    while stack:
        u = current[-1]
        for edge in stack[-1]:
            v = edge.neighbor
            if v in visited:
                continue
            parent[v] = u
            if v == last:
                route = [v]
                while route[-1] != first:
                    route.append(parent[route[-1]])
                route.reverse()
                return route
            visited.add(v)
            stack.append(iter(paths.neighbors(v)))
            current.append(v)
            break
        else:
            stack.pop()
            current.pop()
    return None


def format_path(path: Sequence[int]) -> str:
    """Render a path as printed: each computer followed by a space, a lone one bare."""
    if len(path) == 1:
        return str(path[0])
    return "".join(f"{computer} " for computer in path)