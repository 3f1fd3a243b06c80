import io

import pytest

from algotasks.cars import DisjointSet, Edge, minimum_range, main

TRIANGLE = [(0, 1, 5), (1, 2, 3), (0, 2, 10)]


def test_triangle_uses_two_shortest_roads():
    assert minimum_range(3, TRIANGLE) == 5


def test_edge_objects_match_tuples():
    edges = [Edge(*road) for road in TRIANGLE]
    assert minimum_range(3, edges) == minimum_range(3, TRIANGLE)


def test_single_city_needs_no_range():
    assert minimum_range(1, []) == 0


def test_city_out_of_range_raises():
    with pytest.raises(ValueError):
        minimum_range(2, [(0, 2, 4)])


def test_disjoint_set_union_and_find():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(3)
    assert sets.union(2, 3) is True
    assert sets.union(1, 3) is True
    assert len({sets.find(x) for x in range(4)}) == 1


def test_result_is_bottleneck_of_connectivity():
    roads = [(0, 1, 4), (1, 2, 9), (2, 3, 2), (0, 3, 12), (1, 3, 7), (3, 4, 11)]
    best = minimum_range(5, roads)
    within = DisjointSet(5)
    for u, v, w in roads:
        if w <= best:
            within.union(u, v)
    assert len({within.find(x) for x in range(5)}) == 1
    below = DisjointSet(5)
    for u, v, w in roads:
        if w < best:
            below.union(u, v)
    assert len({below.find(x) for x in range(5)}) > 1


def test_main_reads_cases(monkeypatch, capsys):
    data = "2\n3 3\n0 1 5\n1 2 3\n0 2 10\n2 1\n0 1 7\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    assert capsys.readouterr().out == "5\n7\n"