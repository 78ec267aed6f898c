"""All-pairs scratch matrices owned by a graph.

Distance and path matrices are allocated lazily by all-pairs algorithms that
live outside this package. The graph only owns them: it keeps the arrays,
records the vertex count they were sized for and releases them on teardown.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from routegraph.logging import get_logger

LOGGER = get_logger(__name__)

# Value stored in path_matrix cells with no predecessor
NO_PATH = -1


class ScratchMatrices:
    """Lazily allocated ``dist`` / ``path`` matrices sized ``n x n``.

    Attributes:
        dist_matrix: float64 matrix filled with ``inf`` after allocation.
        path_matrix: int64 matrix filled with ``NO_PATH`` after allocation.
        size: Vertex count at allocation time (0 when released).
    """

    def __init__(self) -> None:
        self.dist_matrix: Optional[np.ndarray] = None
        self.path_matrix: Optional[np.ndarray] = None
        self.size: int = 0

    @property
    def allocated(self) -> bool:
        return self.dist_matrix is not None or self.path_matrix is not None

    def allocate(self, n: int) -> None:
        """Allocate both matrices for ``n`` vertices, replacing previous ones.

        Args:
            n: Number of vertices.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Matrix dimension must be non-negative, got {n}.")
        self.release()
        self.dist_matrix = np.full((n, n), np.inf, dtype=np.float64)
        self.path_matrix = np.full((n, n), NO_PATH, dtype=np.int64)
        self.size = n
        LOGGER.debug("Allocated %dx%d scratch matrices", n, n)

    def is_stale(self, n: int) -> bool:
        """Return True if matrices are allocated for a vertex count other than ``n``."""
        return self.allocated and self.size != n

    def release(self) -> None:
        """Drop both matrices. Safe to call when nothing is allocated."""
        if not self.allocated:
            return
        self.dist_matrix = None
        self.path_matrix = None
        LOGGER.debug("Released %dx%d scratch matrices", self.size, self.size)
        self.size = 0
