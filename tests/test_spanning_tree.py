from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.spanning_tree import DisjointSet, kruskal, prim


def _components(n, edges):
    parent = {v: v for v in range(1, n + 1)}

    def root(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for u, v, *_ in edges:
        parent[root(u)] = root(v)
    groups = {}
    for v in range(1, n + 1):
        groups.setdefault(root(v), []).append(v)
    return list(groups.values())


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 6))
    weight = st.integers(-5, 20)
    edges = [(draw(st.integers(1, v - 1)), v, draw(weight)) for v in range(2, n + 1)]
    node = st.integers(1, n)
    edges += draw(st.lists(st.tuples(node, node, weight), max_size=6))
    order = draw(st.permutations(range(len(edges))))
    return n, [edges[i] for i in order]


@st.composite
def any_graphs(draw):
    n = draw(st.integers(1, 7))
    node = st.integers(1, n)
    edges = draw(st.lists(st.tuples(node, node, st.integers(0, 30)), max_size=10))
    return n, edges


def test_union_merges_once():
    dsu = DisjointSet(5)
    assert dsu.union(1, 2) is True
    assert dsu.union(2, 1) is False
    assert dsu.find(1) == dsu.find(2)
    assert dsu.find(3) == 3


def test_disjoint_set_rejects_unknown_element():
    dsu = DisjointSet(3)
    with pytest.raises(ValueError):
        dsu.find(4)
    with pytest.raises(ValueError):
        dsu.union(-1, 2)


def test_disjoint_set_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


@settings(max_examples=100)
@given(any_graphs())
def test_disjoint_set_matches_components(graph):
    n, edges = graph
    dsu = DisjointSet(n)
    for u, v, _ in edges:
        dsu.union(u, v)
    for group in _components(n, edges):
        assert len({dsu.find(v) for v in group}) == 1
    assert len({dsu.find(v) for v in range(1, n + 1)}) == len(_components(n, edges))


def test_single_node_tree_costs_nothing():
    assert prim(1, [], 1) == 0


@settings(max_examples=100)
@given(connected_graphs())
def test_prim_and_kruskal_find_the_minimum_tree(graph):
    n, edges = graph
    best = min(
        sum(w for *_, w in subset)
        for subset in combinations(edges, n - 1)
        if len(_components(n, subset)) == 1
    )
    assert kruskal(n, edges) == best
    for start in range(1, n + 1):
        assert prim(n, edges, start) == best


@settings(max_examples=100)
@given(any_graphs())
def test_kruskal_forest_sums_prim_over_components(graph):
    n, edges = graph
    total = sum(prim(n, edges, group[0]) for group in _components(n, edges))
    assert kruskal(n, edges) == total


def test_prim_rejects_bad_start():
    with pytest.raises(ValueError):
        prim(3, [(1, 2, 1)], 4)


def test_kruskal_rejects_bad_edge():
    with pytest.raises(ValueError):
        kruskal(2, [(1, 3, 5)])