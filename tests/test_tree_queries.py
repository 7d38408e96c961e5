import pytest

from graphsolve.tree_queries import path_queries, subtree_queries

VALUES = [4, 2, 5, 2, 1, 3, 8]
PATH_EDGES = [(i, i + 1) for i in range(1, len(VALUES))]
STAR_EDGES = [(1, i) for i in range(2, len(VALUES) + 1)]


def test_subtree_sums_on_path():
    n = len(VALUES)
    answers = subtree_queries(VALUES, PATH_EDGES, [(2, k) for k in range(1, n + 1)])
    assert answers == [sum(VALUES[k - 1 :]) for k in range(1, n + 1)]


def test_subtree_sums_on_star():
    n = len(VALUES)
    answers = subtree_queries(VALUES, STAR_EDGES, [(2, k) for k in range(1, n + 1)])
    assert answers[0] == sum(VALUES)
    assert answers[1:] == VALUES[1:]


def test_subtree_updates():
    values = list(VALUES)
    queries = [(1, 3, 10), (2, 1), (2, 3), (1, 1, 0), (2, 1), (2, 2)]
    answers = subtree_queries(values, PATH_EDGES, queries)
    values[2] = 10
    first = sum(values)
    third = sum(values[2:])
    values[0] = 0
    assert answers == [first, third, sum(values), sum(values[1:])]


def test_path_sums_on_path():
    n = len(VALUES)
    answers = path_queries(VALUES, PATH_EDGES, [(2, k) for k in range(1, n + 1)])
    assert answers == [sum(VALUES[:k]) for k in range(1, n + 1)]


def test_path_sums_on_star():
    n = len(VALUES)
    answers = path_queries(VALUES, STAR_EDGES, [(2, k) for k in range(1, n + 1)])
    assert answers[0] == VALUES[0]
    assert answers[1:] == [VALUES[0] + v for v in VALUES[1:]]


def test_path_updates():
    values = list(VALUES)
    queries = [(1, 2, 9), (2, 5), (1, 2, 9), (1, 6, -1), (2, 7), (2, 1)]
    answers = path_queries(values, PATH_EDGES, queries)
    values[1] = 9
    fifth = sum(values[:5])
    values[5] = -1
    assert answers == [fifth, sum(values), values[0]]


def test_unknown_query_type():
    with pytest.raises(ValueError):
        subtree_queries(VALUES, PATH_EDGES, [(3, 1)])
    with pytest.raises(ValueError):
        path_queries(VALUES, PATH_EDGES, [(0, 1)])


def test_bad_node_and_bad_tree():
    with pytest.raises(ValueError):
        subtree_queries(VALUES, PATH_EDGES, [(2, len(VALUES) + 1)])
    with pytest.raises(ValueError):
        path_queries(VALUES, PATH_EDGES[:-1], [(2, 1)])