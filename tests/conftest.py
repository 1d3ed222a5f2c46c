"""Shared fixtures for overlay tests."""

import numpy as np
import pytest

from som_overlay.abstractions.types.som_types import TrainedGrid
from som_overlay.grid_systems.topology import HexDistanceProvider
from som_overlay.methods.som.bmu import EuclideanBestMatchAssigner
from som_overlay.methods.som.hits import hit_counts
from som_overlay.methods.som.kernels import kernel_weights
from som_overlay.methods.som.overlay import project


def fit_batch_map(data, xdim=5, ydim=5, lattice='rect', kernel='gaussian',
                  max_iter=1000, seed=0):
    """Batch map updates at unit radius until assignments stop changing.

    The returned codebook is a fixed point: each codebook vector is the
    kernel-weighted mean of the data given the assignments it induces.
    """
    rng = np.random.RandomState(seed)
    codebook = data[rng.choice(len(data), xdim * ydim, replace=False)]
    assigner = EuclideanBestMatchAssigner(chunk_size=1000)

    grid = TrainedGrid.from_topology(xdim, ydim, codebook, lattice=lattice,
                                     neigh_kernel=kernel)
    weights = kernel_weights(HexDistanceProvider().distances(grid), kernel)

    previous = None
    for _ in range(max_iter):
        assignment = assigner.assign(grid, data).assignment
        if previous is not None and np.array_equal(assignment, previous):
            return grid
        codebook = project(weights, assignment, hit_counts(assignment, grid.n_hex), data)
        grid = TrainedGrid.from_topology(xdim, ydim, codebook, lattice=lattice,
                                         neigh_kernel=kernel)
        previous = assignment

    pytest.fail("Batch map did not reach a fixed point")


@pytest.fixture
def batch_map_factory():
    """Factory fitting fixed-point batch maps."""
    return fit_batch_map


@pytest.fixture
def sample_data():
    """100x10 iid standard normal data."""
    np.random.seed(42)
    return np.random.randn(100, 10)


@pytest.fixture
def trained_grid(sample_data):
    """5x5 rectangular map with gaussian kernel fitted to sample_data."""
    return fit_batch_map(sample_data)


@pytest.fixture
def line_grid():
    """Five cells in a row with 1-D codebook values 0..4 and a bubble kernel."""
    return TrainedGrid.from_topology(
        5, 1, np.arange(5, dtype=float).reshape(5, 1),
        lattice='rect', neigh_kernel='bubble'
    )


@pytest.fixture
def line_data():
    """Two points near each end of line_grid."""
    data = np.array([[0.1], [-0.2], [4.1], [3.9]])
    additional = np.array([[10.0], [20.0], [30.0], [50.0]])
    return data, additional
