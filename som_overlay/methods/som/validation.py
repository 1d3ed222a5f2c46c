"""Input validation for map overlays.

Normalizes the grid, data and auxiliary arguments into dense float
matrices and raises the matching OverlayError subclass on any contract
violation.
"""

import numbers
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from ...abstractions.types.som_types import TrainedGrid
from .constants import (
    GRID_TYPE_MSG, MISSING_DATA_MSG, MISSING_ADDITIONAL_MSG,
    ADDITIONAL_SHAPE_MSG, NON_NUMERIC_MSG, NON_NUMERIC_DATA_MSG, NON_FINITE_DATA_MSG
)
from .exceptions import (
    GridTypeMismatchError, MissingInputError,
    ShapeMismatchError, NonNumericInputError
)


def validate_grid(grid: Any) -> TrainedGrid:
    """Ensure the overlay is applied to a trained map."""
    if not isinstance(grid, TrainedGrid):
        raise GridTypeMismatchError(GRID_TYPE_MSG.format(type(grid).__name__))
    return grid


def prepare_data(data: Any) -> np.ndarray:
    """Return data as a (dlen, n_features) float matrix.

    A bare vector is read as a single row. Every entry must be a finite
    number, since a NaN row has no nearest cell.
    """
    if data is None:
        raise MissingInputError(MISSING_DATA_MSG)

    if isinstance(data, (pd.DataFrame, pd.Series)):
        data = data.to_numpy()

    try:
        matrix = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as e:
        raise NonNumericInputError(NON_NUMERIC_DATA_MSG, e)

    if matrix.ndim <= 1:
        matrix = matrix.reshape(1, -1)
    elif matrix.ndim != 2:
        raise ShapeMismatchError(f"Data must be a vector or a matrix, got {matrix.ndim} dimensions")

    bad_rows = np.flatnonzero(~np.isfinite(matrix).all(axis=1))
    if bad_rows.size:
        raise NonNumericInputError(NON_FINITE_DATA_MSG.format(bad_rows.size, bad_rows[0] + 1))
    return matrix


def _is_real_dtype(dtype) -> bool:
    return (pd.api.types.is_numeric_dtype(dtype)
            and not pd.api.types.is_bool_dtype(dtype)
            and not pd.api.types.is_complex_dtype(dtype))


def _is_real_value(value) -> bool:
    # Strings, None, pd.NA and booleans are not numbers even if castable
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _is_real_column(column: pd.Series) -> bool:
    if column.dtype == object:
        return all(_is_real_value(v) for v in column)
    return _is_real_dtype(column.dtype)


def _frame_labels(columns: pd.Index) -> Optional[List[str]]:
    # A default RangeIndex means the caller never named the columns
    if isinstance(columns, pd.RangeIndex) and columns.start == 0 and columns.step == 1:
        return None
    return [str(c) for c in columns]


def prepare_additional(additional: Any, dlen: int) -> Tuple[np.ndarray, List[str]]:
    """Return the auxiliary signal as a (dlen, k) float matrix plus column labels.

    A bare vector is read as a single column when its length equals dlen.
    Unlabeled columns are named by their 1-based position. Object columns
    are accepted only when every entry is a real number.

    Raises:
        MissingInputError: additional is None
        ShapeMismatchError: row count (or vector length) differs from dlen
        NonNumericInputError: non-numeric or missing entries
    """
    if additional is None:
        raise MissingInputError(MISSING_ADDITIONAL_MSG)

    labels: Optional[List[str]] = None
    if isinstance(additional, pd.Series):
        labels = [str(additional.name) if additional.name is not None else '1']
        additional = additional.to_frame()

    if isinstance(additional, pd.DataFrame):
        if labels is None:
            labels = _frame_labels(additional.columns)
        if not all(_is_real_column(column) for _, column in additional.items()):
            if additional.shape[0] != dlen:
                raise ShapeMismatchError(ADDITIONAL_SHAPE_MSG.format(dlen, additional.shape[0]))
            raise NonNumericInputError(NON_NUMERIC_MSG)
        values = additional.to_numpy(dtype=float, na_value=np.nan)
    else:
        values = np.asarray(additional)

    if values.ndim == 1:
        if values.shape[0] != dlen:
            raise ShapeMismatchError(ADDITIONAL_SHAPE_MSG.format(dlen, values.shape[0]))
        values = values.reshape(dlen, 1)
    elif values.ndim == 2:
        if values.shape[0] != dlen:
            raise ShapeMismatchError(ADDITIONAL_SHAPE_MSG.format(dlen, values.shape[0]))
    else:
        raise ShapeMismatchError(
            f"The input 'additional' must be a vector or a matrix, got {values.ndim} dimensions"
        )

    if values.dtype == object:
        if not all(_is_real_value(v) for v in values.ravel()):
            raise NonNumericInputError(NON_NUMERIC_MSG)
    elif not _is_real_dtype(values.dtype):
        raise NonNumericInputError(NON_NUMERIC_MSG)

    values = values.astype(float)
    if np.isnan(values).any():
        raise NonNumericInputError(NON_NUMERIC_MSG)

    if labels is None:
        labels = [str(i) for i in range(1, values.shape[1] + 1)]
    return values, labels
