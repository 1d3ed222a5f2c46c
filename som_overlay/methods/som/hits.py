"""Hit histogram and neighborhood density aggregation."""

import numpy as np


def hit_counts(assignment: np.ndarray, n_hex: int) -> np.ndarray:
    """Count how many data points have each cell as their best match.

    Args:
        assignment: 1-based cell index per data point
        n_hex: Number of cells in the grid

    Returns:
        Integer vector of length n_hex; cells without hits hold 0
    """
    assignment = np.asarray(assignment, dtype=np.int64)
    if assignment.size and (assignment.min() < 1 or assignment.max() > n_hex):
        raise ValueError(f"Assignments must lie in [1, {n_hex}]")
    return np.bincount(assignment - 1, minlength=n_hex).astype(np.int64)


def cell_density(weights: np.ndarray, hits: np.ndarray) -> np.ndarray:
    """Kernel-weighted data density per cell, grouped by hit counts (H @ hits)."""
    return weights @ np.asarray(hits, dtype=float)


def point_density(weights: np.ndarray, assignment: np.ndarray) -> np.ndarray:
    """Kernel-weighted data density per cell, summed over individual points.

    Equivalent to cell_density; kept for cross-checking.
    """
    columns = np.asarray(assignment, dtype=np.int64) - 1
    return weights[:, columns].sum(axis=1)
