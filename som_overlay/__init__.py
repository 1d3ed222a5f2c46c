"""
SOM overlay: project auxiliary signals onto a trained self-organizing map.
"""

__version__ = "0.1.0"

from .abstractions.types.som_types import (
    NeighborhoodKernel, Lattice, GridShape,
    TrainedGrid, BestMatchResponse, OverlayResult
)
from .methods.som import map_overlay, OverlayProjector

__all__ = [
    'NeighborhoodKernel',
    'Lattice',
    'GridShape',
    'TrainedGrid',
    'BestMatchResponse',
    'OverlayResult',
    'map_overlay',
    'OverlayProjector',
]
