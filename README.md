# cpalgos

Classic algorithms for graphs, trees, strings and arrays, written as small
Python functions and classes with no third-party dependencies.

Graph and tree functions take a node count `n` and a list of edges, with nodes
numbered from 1 to `n`. The exceptions are `cpalgos.bitmask_graph`, whose
vertices are numbered from 0, and `cpalgos.matching`, which numbers left
vertices 1..n and right vertices 1..m. Node numbers outside the allowed range
raise `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `cpalgos.shortest_paths` | `zero_one_bfs`, `dijkstra`, `floyd_warshall`, `bellman_ford`, `find_negative_cycle` |
| `cpalgos.traversal` | `bfs_order`, `shortest_path`, `topological_sort`, `has_directed_cycle`, `find_undirected_cycle` |
| `cpalgos.connectivity` | `articulation_points`, `bridges`, `count_strongly_connected_components`, `bipartite_coloring` |
| `cpalgos.spanning_tree` | `DisjointSet`, `prim`, `kruskal` |
| `cpalgos.flows` | `Dinic`, `edmonds_karp` |
| `cpalgos.matching` | `BipartiteMatching` |
| `cpalgos.bitmask_graph` | `has_hamiltonian_path`, `shortest_tour` |
| `cpalgos.trees` | `centroids`, `diameter`, `heights_from_every_root`, `LowestCommonAncestor` |
| `cpalgos.subtree_colors` | `dominating_color_sums` |
| `cpalgos.string_matching` | `prefix_function`, `kmp_search`, `z_function`, `wildcard_match` |
| `cpalgos.string_dp` | `longest_common_subsequence`, `longest_palindromic_subsequence`, `longest_palindromic_substring`, `edit_distance` |
| `cpalgos.searching` | `last_index_at_most`, `first_index_at_least`, `bisect_sqrt`, `lis_length` |
| `cpalgos.arrays` | `counting_sort`, `stable_counting_sort`, `max_subarray_sum`, `max_subarray_sum_divide`, `find_subarray_with_sum` |
| `cpalgos.dynamic` | `knapsack`, `subset_sums`, `matrix_chain_cost` |
| `cpalgos.combinatorics` | `max_combination_sum`, `combinations_of`, `permutations_of` |

Some conventions worth knowing:

- The shortest-path functions return a dict from node to distance, with
  `None` for nodes that cannot be reached. `dijkstra` and `bellman_ford` use
  directed edges `(u, v, w)`. `zero_one_bfs` and `floyd_warshall` treat edges
  as undirected. `bellman_ford` does not report negative cycles; use
  `find_negative_cycle` for that. It returns the cycle as `[x, ..., x]`, or
  `[]` if there is none.
- `shortest_path` returns the list of nodes on a fewest-edge path, or `None`.
- `bipartite_coloring` returns colours 1 or 2 for nodes 1..n, or `None` when
  the graph is not bipartite.
- `shortest_tour` takes a square weight matrix and returns `(cost, order)`.
  The order starts at vertex 0.
- `LowestCommonAncestor.kth_ancestor` returns `None` when asked to go above
  the root.

## Examples

Shortest paths from node 1 in a weighted directed graph:

```python
from cpalgos.shortest_paths import dijkstra

edges = [(1, 2, 4), (1, 3, 1), (3, 2, 2)]
dijkstra(3, edges, 1)  # {1: 0, 2: 3, 3: 1}
```

Maximum flow from node 1 to node 4:

```python
from cpalgos.flows import Dinic, edmonds_karp

net = Dinic(4, 1, 4)
net.add_edge(1, 2, 3)
net.add_edge(2, 4, 2)
net.add_edge(1, 3, 1)
net.add_edge(3, 4, 5)
net.max_flow()  # 3

edmonds_karp(4, [(1, 2, 3), (2, 4, 2), (1, 3, 1), (3, 4, 5)], 1, 4)  # 3
```

Maximum bipartite matching:

```python
from cpalgos.matching import BipartiteMatching

matching = BipartiteMatching(3, 3)
for left, right in [(1, 2), (2, 3), (2, 1), (2, 2), (3, 3)]:
    matching.add_edge(left, right)
matching.solve()  # 3
```

Lowest common ancestor queries on a tree rooted at node 1:

```python
from cpalgos.trees import LowestCommonAncestor

tree = LowestCommonAncestor(5, [(1, 2), (1, 3), (2, 4), (2, 5)], 1)
tree.lca(4, 5)       # 2
tree.distance(4, 3)  # 3
```

String searching:

```python
from cpalgos.string_matching import kmp_search

kmp_search("AABAACAADAABAABA", "AABA")  # [0, 9, 12]
```

## What this package does not do

There is no command-line program. Nothing reads graphs or strings from
standard input or files. You build the edge lists and sequences in Python and
pass them to the functions.