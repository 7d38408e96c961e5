# graphsolve

Pure-Python solvers for classic graph and tree problems. Every solver is a
plain function: it takes nodes, edges and queries as Python values and returns
its answer as a Python value. The package has no dependencies outside the
standard library.

Nodes are numbered from 1 unless a function says otherwise, and edges are
`(a, b)` or `(a, b, weight)` tuples. Grids are sequences of strings in which
`#` marks a wall.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `graphsolve.undirected` | `building_roads`, `building_teams`, `message_route`, `round_trip`, `NoSolutionError` |
| `graphsolve.directed` | `course_schedule`, `round_trip_ii`, `longest_flight_route`, `game_routes`, `flight_routes_check` |
| `graphsolve.grids` | `count_rooms`, `labyrinth`, `monsters` |
| `graphsolve.shortest_paths` | `shortest_path`, `all_pairs_shortest_paths`, `flight_discount`, `flight_routes`, `investigation` |
| `graphsolve.bellman_ford` | `high_score`, `find_negative_cycle` |
| `graphsolve.connectivity` | `DisjointSet`, `road_reparation`, `road_construction` |
| `graphsolve.scc` | `strongly_connected_components`, `planets_and_kingdoms`, `coin_collector`, `giant_pizza` |
| `graphsolve.tours` | `knight_tour`, `hamiltonian_flights`, `de_bruijn`, `mail_delivery`, `teleporters_path` |
| `graphsolve.flows` | `download_speed`, `distinct_routes`, `police_chase`, `school_dance` |
| `graphsolve.functional` | `planet_cycles`, `planet_queries`, `planet_queries_ii` |
| `graphsolve.ancestors` | `company_queries`, `company_queries_ii`, `distance_queries` |
| `graphsolve.trees` | `subordinates`, `tree_diameter`, `tree_distances`, `tree_distance_sums`, `tree_matching` |
| `graphsolve.segment_trees` | `SegmentTree`, `LazySegmentTree` |
| `graphsolve.tree_queries` | `subtree_queries`, `path_queries` |

## Examples

Fewest new roads that connect every city:

```python
from graphsolve.undirected import building_roads

building_roads(4, [(1, 2), (3, 4)])  # [(1, 3)]
```

Shortest distances from node 1 over directed weighted edges; unreachable
nodes get `None`:

```python
from graphsolve.shortest_paths import shortest_path

shortest_path(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3)])  # [0, 5, 2]
```

Maximum flow from node 1 to node `n`:

```python
from graphsolve.flows import download_speed

download_speed(4, [(1, 2, 3), (2, 4, 2), (1, 3, 4), (3, 4, 5)])  # 6
```

A shortest way through a grid from `A` to `B`, as a string of moves:

```python
from graphsolve.grids import labyrinth

labyrinth(["A.#", "..B"])  # "DRR"
```

Union-find and segment trees are usable on their own:

```python
from graphsolve.connectivity import DisjointSet
from graphsolve.segment_trees import SegmentTree

components = DisjointSet(range(1, 6))
components.union(1, 2)   # True
components.size(1)       # 2

tree = SegmentTree([4, 2, 5, 3])
tree.update(1, 7)
tree.query(0, 3)         # 16, the sum of positions 0, 1 and 2
```

## When there is no answer

Most solvers raise `NoSolutionError` (importable from
`graphsolve.undirected`, and a subclass of `ValueError`) when an instance has
no solution: a graph that is not bipartite, a cycle where an ordering is
needed, an unreachable target. A few report it in their return value instead:
`flight_routes_check` and `find_negative_cycle` return `None`, and
`planet_queries_ii` and `company_queries` answer `-1`. Malformed input, such
as a node number out of range, raises `ValueError` or `IndexError`. Each
function's docstring says which applies.

## What it does not do

graphsolve is a library only. It has no command-line program: it does not
read problem instances from standard input or files, and it prints nothing.
Parsing input and formatting output are left to the caller.