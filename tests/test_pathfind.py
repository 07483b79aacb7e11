import pytest

from netspan.network import InvalidInputError, Network, build_net
from netspan.pathfind import find_path, format_path
from netspan.paths import build_paths
from netspan.prim import build_prim_tree


def _is_walk(net, path):
    return all(
        b in {e.neighbor for e in net.neighbors(a)} for a, b in zip(path, path[1:])
    )


def test_path_along_chain():
    paths = build_paths([None, 0, 1, 2])
    assert find_path(paths, 3, 0) == [3, 2, 1, 0]


def test_path_in_tree_is_walk_with_right_ends():
    net = build_net(6, [(0, 1, 3), (1, 2, 1), (2, 3, 4), (3, 4, 2), (4, 5, 1), (0, 5, 9)])
    paths = build_paths(build_prim_tree(net))
    path = find_path(paths, 2, 5)
    assert path[0] == 2 and path[-1] == 5
    assert len(set(path)) == len(path)
    assert _is_walk(paths, path)


def test_same_endpoints():
    assert find_path(build_paths([None, 0]), 1, 1) == [1]


def test_no_path_returns_none():
    net = Network(3)
    net.add_connection(0, 1, 0)
    assert find_path(net, 0, 2) is None


@pytest.mark.parametrize("first, last", [(-1, 0), (0, 2), (5, 1)])
def test_out_of_range_rejected(first, last):
    with pytest.raises(InvalidInputError, match="Invalid input."):
        find_path(build_paths([None, 0]), first, last)


def test_format_path_trailing_space():
    assert format_path([0, 1, 2]) == "0 1 2 "


def test_format_single_node():
    assert format_path([4]) == "4"