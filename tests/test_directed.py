import pytest

from graphsolve.directed import (
    course_schedule,
    flight_routes_check,
    game_routes,
    longest_flight_route,
    round_trip_ii,
)
from graphsolve.undirected import NoSolutionError


def test_course_schedule_respects_prerequisites():
    edges = [(1, 2), (3, 1), (4, 5)]
    order = course_schedule(5, edges)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {course: index for index, course in enumerate(order)}
    assert all(position[a] < position[b] for a, b in edges)


def test_course_schedule_larger_dag():
    edges = [(6, 1), (1, 2), (2, 3), (6, 3), (4, 3), (5, 4), (5, 2)]
    order = course_schedule(6, edges)
    position = {course: index for index, course in enumerate(order)}
    assert len(order) == 6
    assert all(position[a] < position[b] for a, b in edges)


def test_course_schedule_cycle_is_impossible():
    with pytest.raises(NoSolutionError):
        course_schedule(3, [(1, 2), (2, 3), (3, 1)])


def _check_directed_cycle(cycle, edges):
    pairs = set(edges)
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 3
    assert len(set(cycle[:-1])) == len(cycle) - 1
    assert all((a, b) in pairs for a, b in zip(cycle, cycle[1:]))


def test_round_trip_ii_example():
    edges = [(1, 3), (2, 1), (2, 4), (3, 2), (3, 4)]
    _check_directed_cycle(round_trip_ii(4, edges), edges)


def test_round_trip_ii_cycle_away_from_start():
    edges = [(1, 2), (2, 3), (4, 5), (5, 6), (6, 4)]
    cycle = round_trip_ii(6, edges)
    _check_directed_cycle(cycle, edges)
    assert set(cycle) == {4, 5, 6}


def test_round_trip_ii_dag_is_impossible():
    with pytest.raises(NoSolutionError):
        round_trip_ii(4, [(1, 2), (1, 3), (2, 4), (3, 4)])


def test_longest_flight_route_example():
    edges = [(1, 2), (2, 5), (1, 3), (3, 4), (4, 5)]
    assert longest_flight_route(5, edges) == [1, 3, 4, 5]


def test_longest_flight_route_follows_edges():
    edges = [(1, 6), (1, 2), (2, 3), (3, 6), (2, 4), (4, 5), (5, 3)]
    route = longest_flight_route(6, edges)
    pairs = set(edges)
    assert route[0] == 1 and route[-1] == 6
    assert all((a, b) in pairs for a, b in zip(route, route[1:]))
    assert len(route) > len([1, 2, 3, 6])


def test_longest_flight_route_unreachable():
    with pytest.raises(NoSolutionError):
        longest_flight_route(4, [(1, 2), (3, 4)])


def test_game_routes_example():
    assert game_routes(4, [(1, 2), (2, 4), (1, 3), (3, 4), (1, 4)]) == 3


def test_game_routes_doubles_with_each_diamond():
    edges = []
    start = 1
    for _ in range(3):
        a, b, end = start + 1, start + 2, start + 3
        edges += [(start, a), (start, b), (a, end), (b, end)]
        start = end
    assert game_routes(start, edges) == 2**3


def test_game_routes_unreachable_is_zero():
    assert game_routes(3, [(1, 2)]) == 0


def test_flight_routes_check_strongly_connected():
    assert flight_routes_check(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_flight_routes_check_example():
    assert flight_routes_check(4, [(1, 2), (2, 3), (3, 1), (1, 4), (3, 2)]) == (4, 1)


def test_flight_routes_check_unreachable_from_start():
    assert flight_routes_check(2, [(2, 1)]) == (1, 2)