"""Command line: read a network, span it, and print a path through the tree."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from netspan.network import InvalidInputError, build_net
from netspan.pathfind import find_path, format_path
from netspan.paths import build_paths
from netspan.prim import NoSpanningTreeError, build_prim_tree


def _ints(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise InvalidInputError(f"not a number: {token!r}") from None


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise InvalidInputError("input ended early") from None


def run(text: str) -> str:
    """Process a whole input text and return what the program prints."""
    numbers = _ints(text)
    n = _take(numbers)
    if n <= 0:
        return "Invalid Input\n"
    m = _take(numbers)
    triples = [(_take(numbers), _take(numbers), _take(numbers)) for _ in range(max(m, 0))]
    try:
        network = build_net(n, triples)
    except InvalidInputError:
        return "Invalid input.\n"
    try:
        prim = build_prim_tree(network)
    except NoSpanningTreeError as err:
        return f"{err}\n"
    paths = build_paths(prim)
    first, last = _take(numbers), _take(numbers)
    try:
        path = find_path(paths, first, last)
    except InvalidInputError:
        return "Invalid input.\n"
    if path is None:
        return f"No path found from {first} to {last}\n"
    return format_path(path) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Read the network description from standard input and print the result."""
    parser = argparse.ArgumentParser(
        prog="netspan",
        description="Span a network of computers and print a path between two of them.",
    )
    parser.parse_args(argv)
    try:
        sys.stdout.write(run(sys.stdin.read()))
    except InvalidInputError as err:
        print(f"netspan: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())