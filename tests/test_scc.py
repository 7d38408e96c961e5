import pytest

from graphsolve.scc import (
    coin_collector,
    giant_pizza,
    planets_and_kingdoms,
    strongly_connected_components,
)
from graphsolve.undirected import NoSolutionError


def test_cycle_shares_a_label():
    labels = strongly_connected_components(5, [(1, 2), (2, 3), (3, 1), (4, 5)])
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] != labels[4]
    assert labels[3] != labels[0] and labels[4] != labels[0]


def test_labels_follow_edges_topologically():
    edges = [(1, 4), (2, 3), (3, 2), (3, 4), (4, 1), (5, 2), (6, 5), (6, 1)]
    labels = strongly_connected_components(6, edges)
    for a, b in edges:
        assert labels[a - 1] <= labels[b - 1]


def test_planets_and_kingdoms_count_matches_labels():
    count, labels = planets_and_kingdoms(5, [(1, 2), (2, 1), (3, 4)])
    assert count == len(set(labels))
    assert set(labels) == set(range(1, count + 1))
    assert labels[0] == labels[1]


def test_isolated_planets_are_separate_kingdoms():
    count, labels = planets_and_kingdoms(4, [])
    assert count == len(labels)
    assert sorted(labels) == list(range(1, count + 1))


def test_coin_collector_sample():
    assert coin_collector([4, 5, 2, 7], [(1, 2), (2, 1), (1, 3), (2, 4)]) == 16


def test_coin_collector_single_cycle_takes_everything():
    coins = [3, 8, 1, 6]
    edges = [(1, 2), (2, 3), (3, 4), (4, 1)]
    assert coin_collector(coins, edges) == sum(coins)


def test_coin_collector_without_edges_takes_richest_room():
    coins = [3, 9, 4]
    assert coin_collector(coins, []) == max(coins)


def test_coin_collector_extra_edge_never_hurts():
    coins = [2, 5, 7, 1]
    edges = [(1, 2), (3, 4)]
    assert coin_collector(coins, edges + [(2, 3)]) >= coin_collector(coins, edges)


def _satisfies(choice, wishes):
    return all(
        choice[a - 1] == first or choice[b - 1] == second for first, a, second, b in wishes
    )


def test_giant_pizza_satisfies_every_wish():
    wishes = [("+", 1, "+", 2), ("-", 1, "+", 3), ("+", 4, "-", 2)]
    choice = giant_pizza(5, wishes)
    assert len(choice) == 5
    assert set(choice) <= {"+", "-"}
    assert _satisfies(choice, wishes)


def test_giant_pizza_forced_choices():
    wishes = [("-", 1, "-", 1), ("+", 2, "+", 2), ("+", 1, "-", 3)]
    choice = giant_pizza(3, wishes)
    assert choice[0] == "-"
    assert choice[1] == "+"
    assert _satisfies(choice, wishes)


def test_giant_pizza_impossible():
    with pytest.raises(NoSolutionError):
        giant_pizza(1, [("+", 1, "+", 1), ("-", 1, "-", 1)])


def test_giant_pizza_rejects_bad_sign():
    with pytest.raises(ValueError):
        giant_pizza(2, [("*", 1, "+", 2)])


def test_giant_pizza_rejects_unknown_topping():
    with pytest.raises(ValueError):
        giant_pizza(2, [("+", 3, "+", 2)])