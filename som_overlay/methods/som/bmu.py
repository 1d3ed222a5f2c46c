"""Best-matching cell assignment against a trained codebook."""

from typing import Optional
import logging

import numpy as np
from scipy.spatial.distance import cdist

from ...abstractions.interfaces.grid_services import IBestMatchAssigner
from ...abstractions.types.som_types import TrainedGrid, BestMatchResponse
from .constants import BEST_MATCH_MODE, FEATURE_COUNT_MSG
from .exceptions import ShapeMismatchError

logger = logging.getLogger(__name__)


class EuclideanBestMatchAssigner(IBestMatchAssigner):
    """Assign each data row to the codebook row nearest in Euclidean distance.

    Rows are compared in chunks so the distance matrix never holds more
    than chunk_size x n_hex entries.
    """

    def __init__(self, chunk_size: Optional[int] = None):
        """Initialize assigner.

        Args:
            chunk_size: Rows per chunk (defaults to assignment_config.chunk_size)
        """
        if chunk_size is None:
            from ...config.som import get_overlay_config
            chunk_size = get_overlay_config().get_chunk_size()
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size

    def assign(self, grid: TrainedGrid, data: np.ndarray,
               mode: str = BEST_MATCH_MODE) -> BestMatchResponse:
        """Assign every data row to its nearest codebook row.

        Rows must be finite. A row holding NaN has NaN distance to every
        cell, and argmin would silently pick cell 1, so callers go through
        prepare_data, which rejects such rows.
        """
        if mode != BEST_MATCH_MODE:
            raise ValueError(f"Unsupported match mode '{mode}'; only '{BEST_MATCH_MODE}' is available")

        data = np.atleast_2d(np.asarray(data, dtype=float))
        codebook = grid.codebook
        if data.shape[1] != codebook.shape[1]:
            raise ShapeMismatchError(FEATURE_COUNT_MSG.format(data.shape[1], codebook.shape[1]))

        n_samples = data.shape[0]
        assignment = np.empty(n_samples, dtype=np.int64)
        qerr = np.empty(n_samples, dtype=float)

        for start in range(0, n_samples, self.chunk_size):
            end = min(start + self.chunk_size, n_samples)
            distances = cdist(data[start:end], codebook, metric='euclidean')
            best = np.argmin(distances, axis=1)
            assignment[start:end] = best + 1
            qerr[start:end] = distances[np.arange(end - start), best]

        logger.debug(f"Assigned {n_samples} samples to {grid.n_hex} cells "
                     f"in chunks of {self.chunk_size}")
        return BestMatchResponse(assignment=assignment, quantization_error=qerr)
