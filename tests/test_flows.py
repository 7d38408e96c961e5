from collections import Counter, defaultdict, deque

import pytest

from graphsolve.flows import distinct_routes, download_speed, police_chase, school_dance

SPEED_EXAMPLE = [(1, 2, 3), (2, 4, 2), (1, 3, 4), (3, 4, 5), (4, 1, 3)]
ROUTES_EXAMPLE = [(1, 2), (1, 3), (2, 6), (3, 4), (3, 5), (4, 6), (5, 6)]
CHASE_EXAMPLE = [(1, 2), (1, 3), (2, 3), (3, 4), (1, 4)]


def _connected(n, streets, a, b):
    adjacency = defaultdict(list)
    for x, y in streets:
        adjacency[x].append(y)
        adjacency[y].append(x)
    seen = {a}
    queue = deque([a])
    while queue:
        for nxt in adjacency[queue.popleft()]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return b in seen


def test_download_speed_example():
    assert download_speed(4, SPEED_EXAMPLE) == 6


def test_download_speed_bottleneck_of_chain():
    assert download_speed(3, [(1, 2, 5), (2, 3, 2)]) == 2


def test_download_speed_parallel_links_add_up():
    links = [(1, 2, 3), (1, 2, 4)]
    assert download_speed(2, links) == sum(c for _, _, c in links)


def test_download_speed_unreachable_is_zero():
    assert download_speed(3, [(1, 2, 5)]) == 0


def test_download_speed_same_source_and_sink():
    with pytest.raises(ValueError):
        download_speed(1, [])


def test_distinct_routes_example_count():
    assert len(distinct_routes(6, ROUTES_EXAMPLE)) == 2


def test_distinct_routes_are_valid_and_disjoint():
    routes = distinct_routes(6, ROUTES_EXAMPLE)
    available = Counter(ROUTES_EXAMPLE)
    used = Counter()
    for route in routes:
        assert route[0] == 1 and route[-1] == 6
        for step in zip(route, route[1:]):
            assert step in available
            used[step] += 1
    assert all(used[e] <= available[e] for e in used)
    unit = [(a, b, 1) for a, b in ROUTES_EXAMPLE]
    assert len(routes) == download_speed(6, unit)


def test_distinct_routes_none_when_unreachable():
    assert distinct_routes(3, [(1, 2)]) == []


def test_police_chase_example_size():
    assert len(police_chase(4, CHASE_EXAMPLE)) == 2


def test_police_chase_cut_separates():
    cut = police_chase(4, CHASE_EXAMPLE)
    closed = {frozenset(street) for street in cut}
    remaining = [s for s in CHASE_EXAMPLE if frozenset(s) not in closed]
    assert _connected(4, CHASE_EXAMPLE, 1, 4)
    assert not _connected(4, remaining, 1, 4)
    doubled = [(a, b, 1) for a, b in CHASE_EXAMPLE] + [(b, a, 1) for a, b in CHASE_EXAMPLE]
    assert len(cut) == download_speed(4, doubled)


def test_police_chase_already_separated():
    assert police_chase(4, [(1, 2), (3, 4)]) == []


def test_school_dance_is_maximum_matching():
    pairs = [(1, 1), (1, 2), (2, 1), (3, 1)]
    result = school_dance(3, 2, pairs)
    assert set(result) <= set(pairs)
    assert len({boy for boy, _ in result}) == len(result)
    assert len({girl for _, girl in result}) == len(result)
    network = (
        [(1, 1 + boy, 1) for boy in range(1, 4)]
        + [(1 + boy, 4 + girl, 1) for boy, girl in pairs]
        + [(4 + girl, 7, 1) for girl in range(1, 3)]
    )
    assert len(result) == download_speed(7, network)


def test_school_dance_without_pairs():
    assert school_dance(2, 2, []) == []


def test_school_dance_rejects_unknown_pupil():
    with pytest.raises(ValueError):
        school_dance(1, 1, [(2, 1)])