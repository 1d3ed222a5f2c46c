"""Collaborator interfaces consumed by the overlay projector."""

from abc import ABC, abstractmethod
import numpy as np

from ..types.som_types import TrainedGrid, BestMatchResponse


class IGridDistanceProvider(ABC):
    """Interface for pairwise grid-cell distance providers."""

    @abstractmethod
    def distances(self, grid: TrainedGrid) -> np.ndarray:
        """Squared distances between all pairs of grid cells.

        Args:
            grid: Trained grid whose cell coordinates are used

        Returns:
            Symmetric (n_hex, n_hex) matrix of non-negative squared
            distances with a zero diagonal
        """
        pass


class IBestMatchAssigner(ABC):
    """Interface for best-matching cell assignment."""

    @abstractmethod
    def assign(self, grid: TrainedGrid, data: np.ndarray,
               mode: str = "best") -> BestMatchResponse:
        """Find the best-matching cell for every data row.

        Args:
            grid: Trained grid whose codebook is searched
            data: Data matrix of shape (dlen, n_features)
            mode: Which match to report; only "best" is defined

        Returns:
            BestMatchResponse with 1-based cell indices in [1, n_hex]
        """
        pass
