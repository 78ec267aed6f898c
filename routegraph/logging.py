"""Logging for routegraph.

Every module logs through a child of the ``routegraph`` logger. Importing the
package installs one handler on that logger at INFO, so the WARNING emitted
when `Graph.validate` finds broken invariants is shown, while the DEBUG
records for vertex removal, matrix allocation, cycle detection and spanning
tree sizes stay hidden until `debug_logging` or `set_log_level` turns them on.

Example:
    >>> from routegraph import Graph
    >>> from routegraph.logging import debug_logging
    >>>
    >>> g = Graph()
    >>> g.add_vertex("A")
    True
    >>> with debug_logging():
    ...     g.remove_vertex("A")  # logs "Removed vertex 'A' ..."
    True
"""

import logging
import sys
from contextlib import contextmanager
from typing import IO, Iterator, Optional

ROOT_LOGGER_NAME = "routegraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by configure_logging; replaced on reconfiguration
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the ``routegraph`` logger.

    Any handler installed by an earlier call is removed first, so the logger
    never carries more than one routegraph handler. Handlers added by the
    application are left alone.

    Args:
        level: Level for the package logger (default: INFO).
        stream: Output stream (default: stdout).
        format_string: Record format.

    Returns:
        The ``routegraph`` logger.
    """
    global _handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(_handler)
    root_logger.setLevel(level)
    # Propagate so pytest's caplog sees our records
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a routegraph module.

    Names outside the package namespace are nested under ``routegraph`` so
    they share its level and handler.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int) -> int:
    """Set the level of the ``routegraph`` logger and return the previous one."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root_logger.level
    root_logger.setLevel(level)
    return previous


@contextmanager
def debug_logging() -> Iterator[logging.Logger]:
    """Emit routegraph DEBUG records for the duration of the block."""
    previous = set_log_level(logging.DEBUG)
    try:
        yield logging.getLogger(ROOT_LOGGER_NAME)
    finally:
        set_log_level(previous)


configure_logging()
