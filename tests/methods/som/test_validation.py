"""Tests for overlay input validation."""

import numpy as np
import pandas as pd
import pytest

from som_overlay.methods.som.exceptions import (
    GridTypeMismatchError, MissingInputError, OverlayError,
    ShapeMismatchError, NonNumericInputError
)
from som_overlay.methods.som.validation import (
    validate_grid, prepare_data, prepare_additional
)


class TestValidateGrid:
    """Grid type checks."""

    def test_accepts_trained_grid(self, line_grid):
        assert validate_grid(line_grid) is line_grid

    @pytest.mark.parametrize('grid', [None, {'n_hex': 5}, np.zeros((5, 1))])
    def test_rejects_other_types(self, grid):
        with pytest.raises(GridTypeMismatchError) as excinfo:
            validate_grid(grid)

        assert isinstance(excinfo.value, TypeError)


class TestPrepareData:
    """Data normalization."""

    def test_none_rejected(self):
        with pytest.raises(MissingInputError):
            prepare_data(None)

    def test_vector_becomes_single_row(self):
        matrix = prepare_data([1, 2, 3])

        assert matrix.shape == (1, 3)
        assert matrix.dtype == float

    def test_dataframe_converted(self):
        matrix = prepare_data(pd.DataFrame({'a': [1, 2], 'b': [3.5, 4.5]}))

        np.testing.assert_array_equal(matrix, [[1, 3.5], [2, 4.5]])

    def test_three_dimensional_rejected(self):
        with pytest.raises(ShapeMismatchError):
            prepare_data(np.zeros((2, 2, 2)))

    def test_non_numeric_frame_rejected(self):
        with pytest.raises(NonNumericInputError) as excinfo:
            prepare_data(pd.DataFrame({'a': ['x', 'y']}))

        assert isinstance(excinfo.value, OverlayError)
        assert isinstance(excinfo.value.original_exception, ValueError)

    @pytest.mark.parametrize('bad', [np.nan, np.inf, -np.inf])
    def test_non_finite_row_rejected(self, bad):
        data = np.ones((4, 3))
        data[2, 1] = bad

        with pytest.raises(NonNumericInputError, match='first at row 3'):
            prepare_data(data)


class TestPrepareAdditional:
    """Auxiliary signal normalization."""

    def test_none_rejected(self):
        with pytest.raises(MissingInputError):
            prepare_additional(None, 10)

    def test_vector_becomes_single_column(self):
        values, names = prepare_additional(np.arange(4), 4)

        assert values.shape == (4, 1)
        assert names == ['1']

    def test_vector_length_must_match(self):
        with pytest.raises(ShapeMismatchError):
            prepare_additional(np.arange(3), 4)

    def test_row_count_must_match(self):
        np.random.seed(42)
        with pytest.raises(ShapeMismatchError):
            prepare_additional(np.random.randn(99, 2), 100)

    def test_higher_dimensions_rejected(self):
        with pytest.raises(ShapeMismatchError):
            prepare_additional(np.zeros((4, 2, 2)), 4)

    def test_missing_value_rejected(self):
        additional = np.ones((5, 2))
        additional[3, 0] = np.nan

        with pytest.raises(NonNumericInputError):
            prepare_additional(additional, 5)

    def test_none_entry_rejected(self):
        with pytest.raises(NonNumericInputError):
            prepare_additional([[1.0], [None], [3.0]], 3)

    def test_string_column_rejected(self):
        frame = pd.DataFrame({'x': [1.0, 2.0], 'label': ['a', 'b']})

        with pytest.raises(NonNumericInputError):
            prepare_additional(frame, 2)

    def test_strings_rejected(self):
        with pytest.raises(NonNumericInputError):
            prepare_additional(np.array(['1', '2']), 2)

    def test_booleans_rejected(self):
        with pytest.raises(NonNumericInputError):
            prepare_additional(np.array([True, False]), 2)

    def test_frame_with_missing_value_rejected(self):
        frame = pd.DataFrame({'x': [1.0, None, 3.0]})

        with pytest.raises(NonNumericInputError):
            prepare_additional(frame, 3)

    def test_infinite_values_allowed(self):
        values, _ = prepare_additional(np.array([1.0, np.inf]), 2)

        assert np.isinf(values[1, 0])

    def test_integers_converted(self):
        values, _ = prepare_additional(np.array([[1, 2], [3, 4]]), 2)

        assert values.dtype == float

    def test_frame_labels_preserved(self):
        frame = pd.DataFrame({'temp': [1.0, 2.0], 'rain': [0.5, 0.1]})

        values, names = prepare_additional(frame, 2)

        assert names == ['temp', 'rain']
        np.testing.assert_array_equal(values, [[1.0, 0.5], [2.0, 0.1]])

    def test_default_frame_columns_numbered(self):
        _, names = prepare_additional(pd.DataFrame(np.ones((3, 2))), 3)

        assert names == ['1', '2']

    def test_series_name_used(self):
        values, names = prepare_additional(pd.Series([1.0, 2.0], name='depth'), 2)

        assert names == ['depth']
        assert values.shape == (2, 1)

    def test_unnamed_series(self):
        _, names = prepare_additional(pd.Series([1.0, 2.0]), 2)

        assert names == ['1']

    def test_object_strings_rejected(self):
        with pytest.raises(NonNumericInputError):
            prepare_additional(np.array(['1.5', '2'], dtype=object), 2)

    def test_object_reals_accepted(self):
        values, _ = prepare_additional(np.array([1.5, 2], dtype=object), 2)

        assert values.dtype == float
        np.testing.assert_array_equal(values, [[1.5], [2.0]])

    def test_object_frame_column_matches_array(self):
        frame = pd.DataFrame({'a': np.array([1.5, 2.0], dtype=object)})

        from_frame, names = prepare_additional(frame, 2)
        from_array, _ = prepare_additional(np.array([1.5, 2.0], dtype=object), 2)

        assert names == ['a']
        np.testing.assert_array_equal(from_frame, from_array)

    def test_object_frame_column_with_strings_rejected(self):
        frame = pd.DataFrame({'a': np.array([1.5, '2'], dtype=object)})

        with pytest.raises(NonNumericInputError):
            prepare_additional(frame, 2)
