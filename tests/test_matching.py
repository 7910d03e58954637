import pytest
from hypothesis import given, strategies as st

from cpalgos.matching import BipartiteMatching


def test_worked_example():
    mat = BipartiteMatching(3, 3)
    for u, v in [(1, 2), (2, 3), (2, 1), (2, 2), (3, 3)]:
        mat.add_edge(u, v)
    assert mat.solve() == 3


def test_no_edges_gives_empty_matching():
    assert BipartiteMatching(4, 5).solve() == 0


def test_solve_twice_is_stable():
    mat = BipartiteMatching(3, 3)
    for u, v in [(1, 1), (2, 1), (3, 2)]:
        mat.add_edge(u, v)
    first = mat.solve()
    assert mat.solve() == first
    assert first == 2


def test_run_one_matches_free_vertex_once():
    mat = BipartiteMatching(2, 2)
    mat.add_edge(1, 1)
    mat.add_edge(2, 1)
    mat.add_edge(2, 2)
    assert mat.run_one(1) == 1
    assert mat.run_one(1) == 0
    assert mat.run_one(2) == 1


def test_run_one_follows_augmenting_path():
    mat = BipartiteMatching(2, 2)
    mat.add_edge(1, 1)
    mat.add_edge(1, 2)
    mat.add_edge(2, 1)
    assert mat.run_one(1) == 1
    assert mat.run_one(2) == 1
    # Everything is matched already, so solve adds nothing.
    assert mat.solve() == 0


def test_run_one_fails_without_free_path():
    mat = BipartiteMatching(2, 1)
    mat.add_edge(1, 1)
    mat.add_edge(2, 1)
    assert mat.run_one(1) == 1
    assert mat.run_one(2) == 0


@pytest.mark.parametrize("n, m", [(-1, 2), (2, -1)])
def test_negative_sizes_rejected(n, m):
    with pytest.raises(ValueError):
        BipartiteMatching(n, m)


@pytest.mark.parametrize("frm, to", [(0, 1), (3, 1), (1, 0), (1, 3)])
def test_edge_out_of_range_rejected(frm, to):
    mat = BipartiteMatching(2, 2)
    with pytest.raises(ValueError):
        mat.add_edge(frm, to)


def test_run_one_out_of_range_rejected():
    with pytest.raises(ValueError):
        BipartiteMatching(2, 2).run_one(3)


@given(st.integers(1, 12))
def test_identity_edges_match_everything(n):
    mat = BipartiteMatching(n, n)
    for v in range(1, n + 1):
        mat.add_edge(v, v)
    assert mat.solve() == n


@given(st.integers(1, 7), st.integers(1, 7))
def test_complete_bipartite(a, b):
    mat = BipartiteMatching(a, b)
    for u in range(1, a + 1):
        for v in range(1, b + 1):
            mat.add_edge(u, v)
    assert mat.solve() == min(a, b)


@given(
    st.integers(1, 8).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=30),
        )
    )
)
def test_matching_bounded_by_endpoints(case):
    n, edges = case
    mat = BipartiteMatching(n, n)
    for u, v in edges:
        mat.add_edge(u, v)
    size = mat.solve()
    assert size <= len({u for u, _ in edges})
    assert size <= len({v for _, v in edges})
    assert (size == 0) == (not edges)