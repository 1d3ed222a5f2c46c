"""Overlay-specific exceptions for clear error reporting."""

from typing import Optional


class OverlayError(Exception):
    """Base overlay error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class GridTypeMismatchError(OverlayError, TypeError):
    """Raised when the grid argument is not a trained map."""
    pass


class MissingInputError(OverlayError, ValueError):
    """Raised when the data or auxiliary argument is absent."""
    pass


class ShapeMismatchError(OverlayError, ValueError):
    """Raised when input shapes do not line up."""
    pass


class NonNumericInputError(OverlayError, ValueError):
    """Raised when the auxiliary matrix holds non-numeric or missing values."""
    pass


class UnknownKernelError(OverlayError, ValueError):
    """Raised when a grid declares a neighborhood kernel we cannot evaluate."""
    pass
