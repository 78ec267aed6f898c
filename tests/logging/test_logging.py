"""Tests for the records routegraph emits and the package logger setup."""

import logging
from io import StringIO

import pytest

from routegraph import GraphInvariantError
from routegraph.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    debug_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture
def log_stream():
    """Route the package handler to a buffer; restore stdout/INFO afterwards."""
    stream = StringIO()
    configure_logging(
        level=logging.INFO,
        stream=stream,
        format_string="%(levelname)s:%(name)s:%(message)s",
    )
    yield stream
    configure_logging()


def test_mutations_are_silent_at_info(log_stream, diamond1):
    diamond1.remove_vertex("D")
    diamond1.allocate_matrices()
    diamond1.topsort()
    assert log_stream.getvalue() == ""


def test_vertex_removal_logged_at_debug(log_stream, diamond1):
    with debug_logging():
        diamond1.remove_vertex("D")
    out = log_stream.getvalue()
    assert "DEBUG:routegraph.graph.digraph:Removed vertex 'D'" in out
    assert "2 predecessor(s)" in out


def test_edge_removal_count_logged_at_debug(log_stream, line1):
    line1.add_edge(1, 2, 9)
    with debug_logging():
        line1.remove_edge(1, 2)
        line1.remove_edge(1, 3)
    lines = log_stream.getvalue().splitlines()
    assert lines == ["DEBUG:routegraph.graph.digraph:Removed 2 edge(s) 1 -> 2"]


def test_topsort_cycle_logged_at_debug(log_stream, diamond_cycle1):
    with debug_logging():
        assert diamond_cycle1.topsort() == []
    out = log_stream.getvalue()
    assert "routegraph.algorithms.dag" in out
    assert "stopped after 0 of 4 vertices: graph has a cycle" in out


def test_kruskal_component_size_logged_at_debug(log_stream, two_islands1):
    with debug_logging():
        tree = two_islands1.kruskal_mst("A")
    assert len(tree) == 2
    out = log_stream.getvalue()
    assert "routegraph.algorithms.mst" in out
    assert "kruskal_mst('A'): 2 of 3 accepted edges" in out


def test_matrix_lifecycle_logged_at_debug(log_stream, line1):
    with debug_logging():
        line1.allocate_matrices()
        line1.clear()
    out = log_stream.getvalue()
    assert "Allocated 3x3 scratch matrices" in out
    assert "Released 3x3 scratch matrices" in out


def test_validation_failure_logged_at_warning(log_stream, line1):
    line1._vertex_map.pop(1)  # pylint: disable=protected-access
    with pytest.raises(GraphInvariantError):
        line1.validate()
    assert "WARNING:routegraph.graph.validation:Graph failed validation" in (
        log_stream.getvalue()
    )


def test_debug_logging_restores_previous_level(log_stream):
    set_log_level(logging.WARNING)
    with debug_logging() as logger:
        assert logger.name == ROOT_LOGGER_NAME
        assert get_logger("routegraph.graph").isEnabledFor(logging.DEBUG)
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING


def test_debug_logging_restores_level_on_error(log_stream):
    with pytest.raises(RuntimeError):
        with debug_logging():
            raise RuntimeError("boom")
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO


def test_configure_logging_replaces_its_own_handler(log_stream):
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    before = len(root_logger.handlers)

    other = StringIO()
    configure_logging(stream=other)
    configure_logging(stream=other)
    assert len(root_logger.handlers) == before

    get_logger("routegraph.test").info("hello")
    assert "hello" in other.getvalue()
    assert log_stream.getvalue() == ""


def test_get_logger_nests_foreign_names():
    assert get_logger("routegraph.algorithms.mst").name == "routegraph.algorithms.mst"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME
    assert get_logger("plugins.router").name == "routegraph.plugins.router"
