import random

import pytest

from puzzlekit.disjoint_set import DisjointSet


def test_fresh_elements_are_their_own_roots():
    dsu = DisjointSet(26)
    assert [dsu.find(i) for i in range(26)] == list(range(26))


def test_union_uses_smaller_root():
    dsu = DisjointSet(10)
    dsu.union(7, 3)
    assert dsu.find(7) == 3
    assert dsu.find(3) == 3


def test_chained_unions_share_minimum_root():
    dsu = DisjointSet(10)
    dsu.union(5, 9)
    dsu.union(9, 2)
    dsu.union(8, 5)
    assert {dsu.find(x) for x in (2, 5, 8, 9)} == {2}
    assert dsu.find(4) == 4


def test_union_is_idempotent():
    dsu = DisjointSet(5)
    dsu.union(1, 4)
    dsu.union(4, 1)
    dsu.union(1, 4)
    assert dsu.find(4) == 1
    assert dsu.find(1) == 1


@pytest.mark.parametrize("seed", range(8))
def test_root_is_component_minimum(seed):
    rng = random.Random(seed)
    size = 40
    dsu = DisjointSet(size)
    for _ in range(30):
        dsu.union(rng.randrange(size), rng.randrange(size))
    roots = {dsu.find(x) for x in range(size)}
    for root in roots:
        members = [x for x in range(size) if dsu.find(x) == root]
        assert root == min(members)


def test_find_out_of_range_raises():
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(3)


def test_len_reports_size():
    assert len(DisjointSet(26)) == 26