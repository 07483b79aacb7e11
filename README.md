# netspan

`netspan` reads the description of a network of computers, connects them with
a minimum spanning tree built by Prim's algorithm, and prints the path between
two computers inside that tree.

## Installation

```
pip install .
```

## Command line

```
netspan < network.txt
```

The command takes no options besides `--help`. It reads all of standard input
as whitespace-separated integers:

1. `n`: the number of computers, numbered `0` to `n - 1`.
2. `m`: the number of connections.
3. `m` triples `a b price`: a two-way line between computers `a` and `b`.
4. `first last`: the two computers to join.

Example:

```
4
4
0 1 3
1 2 1
2 3 4
0 3 2
1 3
```

prints the path from `1` to `3` through the spanning tree, each computer
followed by a space:

```
1 0 3 
```

When `first` and `last` are the same computer, that number is printed alone.

The messages the command prints instead of a path:

- `Invalid Input` when `n` is zero or negative;
- `Invalid input.` for a connection or an endpoint outside the network, or a
  negative price;
- `No spanning tree available.` when the network is not connected;
- `No path found from <first> to <last>` when the tree holds no path between
  the two computers.

If the input ends early or holds something that is not an integer, the command
writes an error to standard error and exits with status 1.

## Library

```python
from netspan.network import build_net
from netspan.prim import build_prim_tree
from netspan.paths import build_paths
from netspan.pathfind import find_path, format_path

net = build_net(4, [(0, 1, 3), (1, 2, 1), (2, 3, 4), (0, 3, 2)])
prim = build_prim_tree(net)      # [None, 0, 1, 0]: prim[i] is the parent of i
paths = build_paths(prim)
print(format_path(find_path(paths, 1, 3)))   # "1 0 3 "
```

- `netspan.network.Network(size)` keeps, for every computer, its connections
  as `Edge(neighbor, cost)` values sorted by neighbour.
  `Network.add_connection(a, b, cost)` adds a line in both directions,
  `Network.neighbors(computer)` returns a computer's connections, and
  `len(network)` is the number of computers. A non-positive size, a computer
  out of range or a negative cost raises `InvalidInputError` (a `ValueError`).
- `build_net(n, connections)` builds a `Network` from `(a, b, price)` triples.
- `netspan.prim.build_prim_tree(network, start=0)` returns the parent of every
  computer in the minimum spanning tree rooted at `start`, with `None` for the
  root. It raises `NoSpanningTreeError` when some computer cannot be reached,
  and `InvalidInputError` for a `start` outside the network.
- `netspan.paths.build_paths(prim)` turns a parent sequence into a `Network`
  of the tree, every edge priced `0`.
- `netspan.pathfind.find_path(paths, first, last)` searches depth first,
  visiting neighbours in ascending order, and returns the list of computers
  from `first` to `last`, or `None` if there is no path.
  `format_path(path)` renders such a list as the command prints it.
- `netspan.cli.run(text)` takes the whole input as text and returns the output
  the command would print.

## Tests

```
pip install .[test]
pytest
```