"""Overlay of an auxiliary signal onto a trained map.

The hit histogram is smoothed by the map's neighborhood kernel, the
auxiliary signal is smoothed the same way, and the second is normalized
by the first. The result is a kernel regression of the auxiliary signal
over the map topology, using the best-matching cells as sample
locations. Cells whose neighborhood holds no data get NaN.
"""

from typing import Any, Optional

import numpy as np

from ...abstractions.interfaces.grid_services import IGridDistanceProvider, IBestMatchAssigner
from ...abstractions.types.som_types import TrainedGrid, OverlayResult
from ...grid_systems.topology import HexDistanceProvider
from ...infrastructure.logging import get_logger, log_operation
from .bmu import EuclideanBestMatchAssigner
from .constants import BEST_MATCH_MODE, EMPTY_CELL_VALUE
from .hits import hit_counts, cell_density
from .kernels import kernel_weights, resolve_kernel
from .validation import validate_grid, prepare_data, prepare_additional

logger = get_logger(__name__)


def project(weights: np.ndarray, assignment: np.ndarray,
            hits: np.ndarray, additional: np.ndarray) -> np.ndarray:
    """Project auxiliary values onto every cell.

    Args:
        weights: Kernel weight matrix H (n_hex, n_hex)
        assignment: 1-based best-matching cell per data point (dlen,)
        hits: Hit count per cell (n_hex,)
        additional: Auxiliary values (dlen, k)

    Returns:
        Overlay matrix (n_hex, k); rows with zero density are NaN
    """
    # (n_hex, dlen): weight of each data point's cell seen from every cell
    point_weights = weights[:, np.asarray(assignment, dtype=np.int64) - 1]
    numerator = point_weights @ additional
    denominator = cell_density(weights, hits)

    overlay = np.full(numerator.shape, EMPTY_CELL_VALUE, dtype=float)
    dense = denominator != 0
    overlay[dense] = numerator[dense] / denominator[dense, np.newaxis]
    return overlay


class OverlayProjector:
    """Projects auxiliary signals onto trained maps.

    Holds the distance provider and best-match assigner so repeated
    overlays share the same collaborators.
    """

    def __init__(self,
                 distance_provider: Optional[IGridDistanceProvider] = None,
                 assigner: Optional[IBestMatchAssigner] = None):
        self.distance_provider = distance_provider or HexDistanceProvider()
        self.assigner = assigner or EuclideanBestMatchAssigner()

    def overlay(self, grid: Any, data: Any, additional: Any) -> OverlayResult:
        """Overlay additional values onto a trained map.

        Args:
            grid: TrainedGrid the data was mapped with
            data: Data vectors used to locate best-matching cells
            additional: Values to project, one row (or entry) per data vector

        Returns:
            New OverlayResult sharing the grid's layout; the grid is not modified
        """
        grid = validate_grid(grid)
        data = prepare_data(data)
        values, names = prepare_additional(additional, data.shape[0])
        kernel = resolve_kernel(grid.neigh_kernel)

        logger.debug(
            f"Overlaying {values.shape[1]} component(s) of {data.shape[0]} samples "
            f"onto {grid.n_hex} cells with '{kernel.value}' kernel"
        )

        squared_distances = self.distance_provider.distances(grid)
        response = self.assigner.assign(grid, data, mode=BEST_MATCH_MODE)
        hits = hit_counts(response.assignment, grid.n_hex)

        weights = kernel_weights(squared_distances, kernel)
        codebook = project(weights, response.assignment, hits, values)

        n_empty = int(np.all(np.isnan(codebook), axis=1).sum()) if values.shape[1] else 0
        if n_empty:
            logger.warning(
                f"{n_empty} of {grid.n_hex} cells have no data in their "
                f"'{kernel.value}' neighborhood; their overlay values are NaN",
                extra={'context': {'empty_cells': n_empty}}
            )

        return OverlayResult(
            **grid.layout_fields(),
            codebook=codebook,
            hits=hits,
            mqe=response.mqe,
            component_names=tuple(names)
        )


@log_operation("map_overlay", log_args=True)
def map_overlay(grid: Any, data: Any, additional: Any,
                distance_provider: Optional[IGridDistanceProvider] = None,
                assigner: Optional[IBestMatchAssigner] = None) -> OverlayResult:
    """Overlay additional data onto a trained map.

    Shows how a variable that took no part in training distributes over
    the learned topology. Using some training columns as ``additional``
    reproduces the matching codebook columns of the trained map.

    Example:
        overlay = map_overlay(grid, data, data[:, :2])
        overlay.to_frame()
    """
    projector = OverlayProjector(distance_provider=distance_provider, assigner=assigner)
    return projector.overlay(grid, data, additional)
