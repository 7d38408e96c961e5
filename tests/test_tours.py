from collections import Counter

import pytest

from graphsolve.tours import (
    de_bruijn,
    hamiltonian_flights,
    knight_tour,
    mail_delivery,
    teleporters_path,
)
from graphsolve.undirected import NoSolutionError


def _check_tour(board):
    assert len(board) == 8 and all(len(row) == 8 for row in board)
    where = {value: (r, c) for r, row in enumerate(board) for c, value in enumerate(row)}
    assert sorted(where) == list(range(1, 65))
    for step in range(1, 64):
        (r1, c1), (r2, c2) = where[step], where[step + 1]
        assert {abs(r1 - r2), abs(c1 - c2)} == {1, 2}


def test_knight_tour_from_corner():
    board = knight_tour(1, 1)
    assert board[0][0] == 1
    _check_tour(board)


def test_knight_tour_column_and_row_order():
    board = knight_tour(3, 2)
    assert board[1][2] == 1
    _check_tour(board)


def test_knight_tour_rejects_off_board():
    with pytest.raises(ValueError):
        knight_tour(0, 5)


def test_hamiltonian_flights_sample():
    edges = [(1, 2), (1, 3), (2, 3), (3, 2), (2, 4), (3, 4)]
    assert hamiltonian_flights(4, edges) == 2


def test_hamiltonian_flights_chain():
    assert hamiltonian_flights(3, [(1, 2), (2, 3)]) == 1


def test_hamiltonian_flights_no_route():
    assert hamiltonian_flights(3, [(1, 3), (3, 2)]) == 0


def test_hamiltonian_flights_duplicate_flight_doubles_count():
    single = hamiltonian_flights(3, [(1, 2), (2, 3)])
    assert hamiltonian_flights(3, [(1, 2), (1, 2), (2, 3)]) == 2 * single


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_de_bruijn_contains_every_string_once(n):
    text = de_bruijn(n)
    assert len(text) == 2**n + n - 1
    windows = {text[i : i + n] for i in range(len(text) - n + 1)}
    assert len(windows) == 2**n
    assert set(text) <= {"0", "1"}


def test_de_bruijn_rejects_zero():
    with pytest.raises(ValueError):
        de_bruijn(0)


def _unordered(pairs):
    return Counter(frozenset(pair) for pair in pairs)


def test_mail_delivery_uses_every_street_once():
    edges = [(1, 2), (1, 3), (2, 3), (2, 4), (2, 6), (3, 5), (3, 6), (4, 5)]
    route = mail_delivery(6, edges)
    assert route[0] == 1 and route[-1] == 1
    assert len(route) == len(edges) + 1
    assert _unordered(zip(route, route[1:])) == _unordered(edges)


def test_mail_delivery_odd_degree():
    with pytest.raises(NoSolutionError):
        mail_delivery(3, [(1, 2), (2, 3)])


def test_mail_delivery_unreachable_streets():
    edges = [(1, 2), (2, 3), (3, 1), (4, 5), (5, 6), (6, 4)]
    with pytest.raises(NoSolutionError):
        mail_delivery(6, edges)


def test_teleporters_path_uses_every_teleporter_once():
    edges = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 1), (4, 2)]
    route = teleporters_path(5, edges)
    assert route[0] == 1 and route[-1] == 5
    assert len(route) == len(edges) + 1
    assert Counter(zip(route, route[1:])) == Counter(edges)


def test_teleporters_path_unbalanced():
    with pytest.raises(NoSolutionError):
        teleporters_path(3, [(1, 2), (3, 2)])


def test_teleporters_path_unreachable_cycle():
    edges = [(1, 4), (2, 3), (3, 2)]
    with pytest.raises(NoSolutionError):
        teleporters_path(4, edges)