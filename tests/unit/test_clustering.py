"""Tests for the Union-Find structure."""

from __future__ import annotations

from word_groups.engine.clustering import UnionFind


class TestUnionFind:
    """Tests for find / unite semantics."""

    def test_initially_disjoint(self) -> None:
        uf = UnionFind(3)
        assert [uf.find(i) for i in range(3)] == [0, 1, 2]
        assert len(uf) == 3

    def test_find_idempotent(self) -> None:
        uf = UnionFind(6)
        uf.unite(0, 1)
        uf.unite(2, 3)
        uf.unite(1, 3)
        for i in range(6):
            assert uf.find(uf.find(i)) == uf.find(i)

    def test_transitive(self) -> None:
        uf = UnionFind(3)
        uf.unite(0, 1)
        uf.unite(1, 2)
        assert uf.find(0) == uf.find(1) == uf.find(2)

    def test_commutative(self) -> None:
        a = UnionFind(2)
        b = UnionFind(2)
        a.unite(0, 1)
        b.unite(1, 0)
        assert (a.find(0) == a.find(1)) and (b.find(0) == b.find(1))

    def test_unite_reports_merge(self) -> None:
        uf = UnionFind(3)
        assert uf.unite(0, 1) is True
        assert uf.unite(1, 0) is False
        assert uf.unite(0, 0) is False

    def test_tie_keeps_first_root(self) -> None:
        uf = UnionFind(2)
        uf.unite(0, 1)
        assert uf.find(1) == 0

    def test_smaller_tree_goes_under_larger(self) -> None:
        uf = UnionFind(4)
        uf.unite(1, 2)
        uf.unite(0, 1)  # 0 is a singleton, 1's tree has two members
        assert uf.find(0) == 1
        assert uf.size_of(0) == 3

    def test_size_of(self) -> None:
        uf = UnionFind(5)
        uf.unite(0, 1)
        uf.unite(1, 2)
        assert uf.size_of(2) == 3
        assert uf.size_of(4) == 1

    def test_groups(self) -> None:
        uf = UnionFind(4)
        uf.unite(0, 1)
        uf.unite(2, 0)
        assert uf.groups() == {0: [0, 1, 2], 3: [3]}

    def test_long_chain_no_recursion_limit(self) -> None:
        n = 100_000
        uf = UnionFind(n)
        for i in range(n - 1):
            uf.unite(i + 1, i)
        root = uf.find(0)
        assert all(uf.find(i) == root for i in range(0, n, 997))
        assert uf.size_of(n - 1) == n
