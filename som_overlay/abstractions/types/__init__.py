"""Type definitions for SOM overlay analysis."""

from .som_types import (
    NeighborhoodKernel, Lattice, GridShape,
    TrainedGrid, BestMatchResponse, OverlayResult
)

__all__ = [
    'NeighborhoodKernel',
    'Lattice',
    'GridShape',
    'TrainedGrid',
    'BestMatchResponse',
    'OverlayResult',
]
