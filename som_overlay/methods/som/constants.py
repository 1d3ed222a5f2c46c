"""Constants and error messages for the overlay module."""

import numpy as np

# Error handling conventions:
# 1. Cells with zero neighborhood density: np.nan, never replaced
# 2. Contract violations: raise the matching OverlayError subclass

# The neighborhood radius is fixed and already squared
RADIUS = 1.0
RADIUS_SQ = RADIUS ** 2

EMPTY_CELL_VALUE = np.nan

# Only the single best match is used for projection
BEST_MATCH_MODE = "best"

# Error messages
GRID_TYPE_MSG = "The overlay must be applied to a TrainedGrid, got {}"
MISSING_DATA_MSG = "The input data must not be None"
MISSING_ADDITIONAL_MSG = "The input 'additional' must not be None"
ADDITIONAL_SHAPE_MSG = (
    "The input 'additional' must have the same rows/length as the input 'data' "
    "(expected {}, got {})"
)
NON_NUMERIC_MSG = "The input 'additional' must have only numeric values"
UNKNOWN_KERNEL_MSG = "Unknown neighborhood kernel '{}'; expected one of {}"
FEATURE_COUNT_MSG = "Data has {} columns but the codebook has {}"
NON_NUMERIC_DATA_MSG = "The input data must have only numeric values"
NON_FINITE_DATA_MSG = "The input data must be finite; {} row(s) hold NaN or inf, first at row {}"
