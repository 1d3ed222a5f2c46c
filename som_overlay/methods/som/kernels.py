"""Neighborhood kernel weights over the map topology.

Every kernel is a pointwise function of the squared inter-cell distance
scaled by the squared radius, which is fixed at 1. Because the distance
matrix is symmetric, so is every weight matrix produced here.
"""

from typing import Callable, Dict, Union

import numpy as np
from scipy.special import rgamma

from ...abstractions.types.som_types import NeighborhoodKernel
from .constants import RADIUS_SQ, UNKNOWN_KERNEL_MSG
from .exceptions import UnknownKernelError


def _bubble(d: np.ndarray) -> np.ndarray:
    return (d <= 1).astype(float)


def _gaussian(d: np.ndarray) -> np.ndarray:
    return np.exp(-d / 2)


def _cutgaussian(d: np.ndarray) -> np.ndarray:
    return np.exp(-d / 2) * (d <= 1)


def _epanechnikov(d: np.ndarray) -> np.ndarray:
    return (1 - d) * (d <= 1)


def _gamma(d: np.ndarray) -> np.ndarray:
    return rgamma(d / 4 + 2)


KERNEL_FUNCTIONS: Dict[NeighborhoodKernel, Callable[[np.ndarray], np.ndarray]] = {
    NeighborhoodKernel.BUBBLE: _bubble,
    NeighborhoodKernel.GAUSSIAN: _gaussian,
    NeighborhoodKernel.CUTGAUSSIAN: _cutgaussian,
    NeighborhoodKernel.EP: _epanechnikov,
    NeighborhoodKernel.GAMMA: _gamma,
}


def resolve_kernel(identifier: Union[str, NeighborhoodKernel]) -> NeighborhoodKernel:
    """Map a kernel identifier onto a supported kernel family.

    Raises:
        UnknownKernelError: If the identifier names no supported family
    """
    if isinstance(identifier, NeighborhoodKernel):
        return identifier
    try:
        return NeighborhoodKernel(identifier)
    except ValueError as e:
        supported = [k.value for k in NeighborhoodKernel]
        raise UnknownKernelError(UNKNOWN_KERNEL_MSG.format(identifier, supported), e)


def kernel_weights(squared_distances: np.ndarray,
                   kernel: Union[str, NeighborhoodKernel]) -> np.ndarray:
    """Convert squared inter-cell distances into neighborhood weights.

    Args:
        squared_distances: Squared distance matrix (n_hex, n_hex)
        kernel: Kernel family or its identifier

    Returns:
        Non-negative weight matrix with the same shape
    """
    family = resolve_kernel(kernel)
    d = np.asarray(squared_distances, dtype=float) / RADIUS_SQ
    return KERNEL_FUNCTIONS[family](d)
