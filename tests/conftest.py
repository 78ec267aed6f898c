"""Global pytest configuration and shared sample graphs."""

from __future__ import annotations

import pytest

from routegraph import Graph


def build_graph(keys, edges=(), bidirectional=()) -> Graph:
    """Build a graph from vertex keys and ``(src, dst, weight)`` triples."""
    g = Graph()
    for key in keys:
        assert g.add_vertex(key)
    for src, dst, weight in edges:
        assert g.add_edge(src, dst, weight)
    for src, dst, weight in bidirectional:
        assert g.add_bidirectional_edge(src, dst, weight)
    return g


@pytest.fixture
def line1():
    #     [5]      [7]
    #  1──────►2──────►3
    return build_graph([1, 2, 3], edges=[(1, 2, 5), (2, 3, 7)])


@pytest.fixture
def tree1():
    #        1
    #      ┌─┴─┐
    #      ▼   ▼
    #      2   3
    #      │   │
    #      ▼   ▼
    #      4   5
    return build_graph(
        [1, 2, 3, 4, 5],
        edges=[(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 5, 1)],
    )


@pytest.fixture
def diamond1():
    #      A
    #    ┌─┴─┐
    #    ▼   ▼
    #    B   C
    #    └─┬─┘
    #      ▼
    #      D
    return build_graph(
        ["A", "B", "C", "D"],
        edges=[("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def diamond_cycle1(diamond1):
    # diamond1 plus D ──► A
    diamond1.add_edge("D", "A", 1)
    return diamond1


@pytest.fixture
def triangle1():
    #     [1]        [2]
    #  A◄──────►B◄──────►C
    #  ▲                 ▲
    #  └───────[3]───────┘
    return build_graph(
        ["A", "B", "C"],
        bidirectional=[("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)],
    )


@pytest.fixture
def two_islands1():
    #     [4]      [1]          [2]
    #  A◄─────►B◄─────►C     X◄─────►Y
    return build_graph(
        ["A", "B", "C", "X", "Y"],
        bidirectional=[("A", "B", 4.0), ("B", "C", 1.0), ("X", "Y", 2.0)],
    )
