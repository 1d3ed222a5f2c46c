"""Map grid topology and the default grid distance provider."""

from typing import Tuple
import logging

import numpy as np
from scipy.spatial.distance import pdist, squareform

from ..abstractions.interfaces.grid_services import IGridDistanceProvider
from ..abstractions.types.som_types import TrainedGrid, Lattice, GridShape

logger = logging.getLogger(__name__)

DISTANCE_DECIMALS = 10


def build_topology(xdim: int, ydim: int, lattice: str = "hexa",
                   shape: str = "sheet") -> Tuple[int, np.ndarray]:
    """Lay out the cells of a sheet-shaped grid.

    Cells are numbered row by row. In a hexa lattice odd rows are shifted
    half a cell to the right and rows are sqrt(3)/2 apart, so every pair
    of adjacent cells is exactly one unit apart.

    Args:
        xdim: Number of cells per row
        ydim: Number of rows
        lattice: "rect" or "hexa"
        shape: Grid shape; only "sheet" is supported

    Returns:
        n_hex: Total number of cells
        coord: Cell coordinates of shape (n_hex, 2)
    """
    if xdim < 1 or ydim < 1:
        raise ValueError(f"Grid dimensions must be positive, got {xdim}x{ydim}")

    lattice_type = Lattice(lattice)
    GridShape(shape)

    cols, rows = np.meshgrid(np.arange(xdim, dtype=float),
                             np.arange(ydim, dtype=float))
    x = cols.ravel() + 1
    y = rows.ravel() + 1

    if lattice_type is Lattice.HEXA:
        x = x + 0.5 * (rows.ravel() % 2)
        y = y * np.sqrt(3) / 2

    coord = np.column_stack([x, y])
    return xdim * ydim, coord


class HexDistanceProvider(IGridDistanceProvider):
    """Squared Euclidean distances between grid cell coordinates."""

    def distances(self, grid: TrainedGrid) -> np.ndarray:
        coord = np.asarray(grid.coord, dtype=float)
        if coord.shape[0] < 2:
            return np.zeros((coord.shape[0], coord.shape[0]))

        ud = squareform(pdist(coord, metric='sqeuclidean'))
        # Hexa rows are sqrt(3)/2 apart; snap float noise so unit neighbors stay at 1
        ud = np.round(ud, DISTANCE_DECIMALS)
        logger.debug(f"Computed {ud.shape[0]}x{ud.shape[1]} grid distance matrix")
        return ud
