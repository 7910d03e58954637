from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.flows import Dinic, edmonds_karp

EXAMPLE = [(1, 2, 3), (2, 4, 2), (1, 3, 4), (3, 4, 5), (4, 1, 3)]


def _dinic(n, edges, source, sink):
    network = Dinic(n, source, sink)
    for a, b, c in edges:
        network.add_edge(a, b, c)
    return network.max_flow()


@st.composite
def networks(draw):
    n = draw(st.integers(2, 6))
    node = st.integers(1, n)
    edges = draw(st.lists(st.tuples(node, node, st.integers(0, 9)), max_size=10))
    return n, edges


def _min_cut(n, edges, source, sink):
    inner = [v for v in range(1, n + 1) if v not in (source, sink)]
    best = None
    for size in range(len(inner) + 1):
        for extra in combinations(inner, size):
            side = {source, *extra}
            cut = sum(c for a, b, c in edges if a in side and b not in side)
            best = cut if best is None else min(best, cut)
    return best


def test_worked_example():
    assert _dinic(4, EXAMPLE, 1, 4) == 6
    assert edmonds_karp(4, EXAMPLE, 1, 4) == 6


def test_unreachable_sink_carries_no_flow():
    edges = [(1, 2, 5), (3, 2, 4)]
    assert _dinic(3, edges, 1, 3) == 0
    assert edmonds_karp(3, edges, 1, 3) == 0


@settings(max_examples=150)
@given(networks())
def test_max_flow_equals_min_cut(graph):
    n, edges = graph
    expected = _min_cut(n, edges, 1, n)
    assert _dinic(n, edges, 1, n) == expected
    assert edmonds_karp(n, edges, 1, n) == expected


@settings(max_examples=100)
@given(networks())
def test_second_run_adds_nothing(graph):
    n, edges = graph
    network = Dinic(n, 1, n)
    for a, b, c in edges:
        network.add_edge(a, b, c)
    first = network.max_flow()
    assert first == edmonds_karp(n, edges, 1, n)
    assert network.max_flow() == 0


def test_parallel_edges_add_up():
    edges = [(1, 2, 3), (1, 2, 4)]
    assert edmonds_karp(2, edges, 1, 2) == 3 + 4
    assert _dinic(2, edges, 1, 2) == 3 + 4


def test_dinic_rejects_equal_source_and_sink():
    with pytest.raises(ValueError):
        Dinic(3, 2, 2)


def test_dinic_rejects_bad_edges():
    network = Dinic(3, 1, 3)
    with pytest.raises(ValueError):
        network.add_edge(1, 4, 1)
    with pytest.raises(ValueError):
        network.add_edge(1, 2, -1)


def test_edmonds_karp_rejects_bad_input():
    with pytest.raises(ValueError):
        edmonds_karp(3, [(1, 2, -3)], 1, 3)
    with pytest.raises(ValueError):
        edmonds_karp(3, [(1, 2, 3)], 1, 5)