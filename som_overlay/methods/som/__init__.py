"""Overlay of auxiliary signals onto trained self-organizing maps."""

from .overlay import map_overlay, OverlayProjector, project
from .kernels import kernel_weights, resolve_kernel
from .hits import hit_counts, cell_density, point_density
from .bmu import EuclideanBestMatchAssigner
from .exceptions import (
    OverlayError, GridTypeMismatchError, MissingInputError,
    ShapeMismatchError, NonNumericInputError, UnknownKernelError
)

__all__ = [
    'map_overlay',
    'OverlayProjector',
    'project',
    'kernel_weights',
    'resolve_kernel',
    'hit_counts',
    'cell_density',
    'point_density',
    'EuclideanBestMatchAssigner',
    'OverlayError',
    'GridTypeMismatchError',
    'MissingInputError',
    'ShapeMismatchError',
    'NonNumericInputError',
    'UnknownKernelError',
]
