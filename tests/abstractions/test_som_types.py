"""Tests for overlay value types."""

import dataclasses

import numpy as np
import pytest

from som_overlay.abstractions.types.som_types import (
    TrainedGrid, OverlayResult, BestMatchResponse
)


class TestTrainedGrid:
    """Test suite for the trained map value."""

    def test_from_topology(self):
        grid = TrainedGrid.from_topology(3, 2, np.zeros((6, 4)), lattice='rect',
                                         component_names=['a', 'b', 'c', 'd'])

        assert grid.n_hex == 6
        assert grid.coord.shape == (6, 2)
        assert grid.component_names == ('a', 'b', 'c', 'd')

    def test_is_immutable(self):
        grid = TrainedGrid.from_topology(2, 2, np.zeros((4, 1)))

        with pytest.raises(dataclasses.FrozenInstanceError):
            grid.neigh_kernel = 'bubble'
        with pytest.raises(ValueError):
            grid.codebook[0, 0] = 1.0

    def test_copies_caller_arrays(self):
        codebook = np.zeros((4, 1))
        grid = TrainedGrid.from_topology(2, 2, codebook)

        codebook[0, 0] = 99.0

        assert grid.codebook[0, 0] == 0.0

    def test_codebook_rows_must_match_cells(self):
        with pytest.raises(ValueError):
            TrainedGrid.from_topology(2, 2, np.zeros((5, 1)))

    def test_codebook_required(self):
        coord = np.zeros((1, 2))
        with pytest.raises(ValueError):
            TrainedGrid(n_hex=1, xdim=1, ydim=1, lattice='rect', shape='sheet',
                        coord=coord, init='linear', neigh_kernel='gaussian')


class TestOverlayResult:
    """Test suite for the overlay value."""

    @pytest.fixture
    def result(self):
        return OverlayResult(
            n_hex=3, xdim=3, ydim=1, lattice='rect', shape='sheet',
            coord=np.array([[1, 1], [2, 1], [3, 1]]), init='linear',
            neigh_kernel='bubble',
            codebook=np.array([[1.0, 2.0], [np.nan, np.nan], [3.0, 4.0]]),
            hits=np.array([1, 0, 1]), mqe=0.5, component_names=('x', 'y')
        )

    def test_to_frame(self, result):
        frame = result.to_frame()

        assert list(frame.index) == [1, 2, 3]
        assert list(frame.columns) == ['x', 'y']
        assert frame.loc[3, 'y'] == 4.0

    def test_empty_cells(self, result):
        assert result.empty_cells() == [2]

    def test_component_names_must_match_columns(self, result):
        with pytest.raises(ValueError):
            dataclasses.replace(result, component_names=('x',))

    def test_hits_are_read_only(self, result):
        with pytest.raises(ValueError):
            result.hits[0] = 5


class TestBestMatchResponse:
    """Test suite for assignment responses."""

    def test_mqe(self):
        response = BestMatchResponse(assignment=[1, 2], quantization_error=[1.0, 3.0])

        assert response.mqe == 2.0
        assert response.assignment.dtype == np.int64

    def test_empty_mqe_is_nan(self):
        response = BestMatchResponse(assignment=[], quantization_error=[])

        assert np.isnan(response.mqe)
