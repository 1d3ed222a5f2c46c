"""Type definitions for Self-Organizing Map overlay analysis."""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple, Sequence
from enum import Enum

import numpy as np
import pandas as pd


class NeighborhoodKernel(Enum):
    """Neighborhood kernels a trained map can declare."""
    BUBBLE = "bubble"
    GAUSSIAN = "gaussian"
    CUTGAUSSIAN = "cutgaussian"
    EP = "ep"  # Epanechnikov
    GAMMA = "gamma"

    @property
    def has_finite_support(self) -> bool:
        """Whether the kernel drops to zero outside the unit radius."""
        return self in (NeighborhoodKernel.BUBBLE,
                        NeighborhoodKernel.CUTGAUSSIAN,
                        NeighborhoodKernel.EP)


class Lattice(Enum):
    """Lattice types of a map grid."""
    RECT = "rect"
    HEXA = "hexa"


class GridShape(Enum):
    """Overall shapes of a map grid."""
    SHEET = "sheet"


def _frozen_array(values, dtype=float, ndim: Optional[int] = None) -> np.ndarray:
    """Copy values into a read-only array so no caller can alias it."""
    array = np.array(values, dtype=dtype, copy=True)
    if ndim is not None and array.ndim != ndim:
        raise ValueError(f"Expected a {ndim}-D array, got shape {array.shape}")
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class GridLayout:
    """Shape and metadata shared by a trained map and an overlay result.

    Renderers only read these fields, so they work on either value.
    """
    n_hex: int
    xdim: int
    ydim: int
    lattice: str
    shape: str
    coord: np.ndarray  # Shape: (n_hex, 2)
    init: str
    neigh_kernel: str

    def __post_init__(self):
        coord = _frozen_array(self.coord, ndim=2)
        if coord.shape != (self.n_hex, 2):
            raise ValueError(
                f"coord must have shape ({self.n_hex}, 2), got {coord.shape}"
            )
        object.__setattr__(self, 'coord', coord)

    def layout_fields(self) -> dict:
        """Return the grid-shape fields as a dictionary."""
        return {
            'n_hex': self.n_hex,
            'xdim': self.xdim,
            'ydim': self.ydim,
            'lattice': self.lattice,
            'shape': self.shape,
            'coord': self.coord,
            'init': self.init,
            'neigh_kernel': self.neigh_kernel,
        }


@dataclass(frozen=True, eq=False)
class TrainedGrid(GridLayout):
    """A previously trained map. Owned by the caller and never mutated here."""
    codebook: np.ndarray = None  # Shape: (n_hex, n_features)
    component_names: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        super().__post_init__()
        if self.codebook is None:
            raise ValueError("A trained grid requires a codebook")
        codebook = _frozen_array(self.codebook, ndim=2)
        if codebook.shape[0] != self.n_hex:
            raise ValueError(
                f"codebook must have {self.n_hex} rows, got {codebook.shape[0]}"
            )
        object.__setattr__(self, 'codebook', codebook)
        if self.component_names is not None:
            object.__setattr__(self, 'component_names', tuple(self.component_names))

    @classmethod
    def from_topology(cls, xdim: int, ydim: int, codebook: np.ndarray,
                      lattice: str = "hexa", shape: str = "sheet",
                      init: str = "linear", neigh_kernel: str = "gaussian",
                      component_names: Optional[Sequence[str]] = None) -> 'TrainedGrid':
        """Build a trained grid whose coordinates follow the standard layout."""
        from ...grid_systems.topology import build_topology

        n_hex, coord = build_topology(xdim, ydim, lattice=lattice, shape=shape)
        return cls(
            n_hex=n_hex, xdim=xdim, ydim=ydim,
            lattice=lattice, shape=shape, coord=coord,
            init=init, neigh_kernel=neigh_kernel,
            codebook=codebook, component_names=component_names
        )


@dataclass(frozen=True, eq=False)
class BestMatchResponse:
    """Result of assigning data points to their best-matching cells."""
    assignment: np.ndarray  # 1-based cell indices, shape (dlen,)
    quantization_error: np.ndarray  # Per-point distance, shape (dlen,)

    def __post_init__(self):
        object.__setattr__(self, 'assignment',
                           _frozen_array(self.assignment, dtype=np.int64, ndim=1))
        object.__setattr__(self, 'quantization_error',
                           _frozen_array(self.quantization_error, ndim=1))

    @property
    def mqe(self) -> float:
        """Mean quantization error."""
        if self.quantization_error.size == 0:
            return float('nan')
        return float(np.mean(self.quantization_error))


@dataclass(frozen=True, eq=False)
class OverlayResult(GridLayout):
    """Auxiliary signal projected onto the cells of a trained map."""
    codebook: np.ndarray = None  # Shape: (n_hex, k)
    hits: np.ndarray = None  # Shape: (n_hex,)
    mqe: float = float('nan')
    component_names: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        super().__post_init__()
        codebook = _frozen_array(self.codebook, ndim=2)
        hits = _frozen_array(self.hits, dtype=np.int64, ndim=1)
        if codebook.shape[0] != self.n_hex or hits.shape[0] != self.n_hex:
            raise ValueError("codebook and hits must have one row per cell")
        if len(self.component_names) != codebook.shape[1]:
            raise ValueError(
                f"Expected {codebook.shape[1]} component names, "
                f"got {len(self.component_names)}"
            )
        object.__setattr__(self, 'codebook', codebook)
        object.__setattr__(self, 'hits', hits)
        object.__setattr__(self, 'component_names', tuple(self.component_names))

    def to_frame(self) -> pd.DataFrame:
        """Overlay codebook as a DataFrame indexed by 1-based cell index."""
        index = pd.RangeIndex(1, self.n_hex + 1, name='cell')
        return pd.DataFrame(np.array(self.codebook), index=index,
                            columns=list(self.component_names))

    def empty_cells(self) -> List[int]:
        """1-based indices of cells with no data density in their neighborhood."""
        empty = np.all(np.isnan(self.codebook), axis=1)
        return [int(i) + 1 for i in np.flatnonzero(empty)]
