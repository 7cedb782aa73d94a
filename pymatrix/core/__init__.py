"""
Core infrastructure for PyMatrix.

This module provides the shared exception hierarchy, input validators and
numerical constants used by the matrix subpackage.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute.tolerances: Tolerance tiers and numerical limits
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidShapeError,
    ShapeMismatchError,
    NotSquareError,
    IndexOutOfRangeError,
    ColumnOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)

__all__ = [
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "ColumnOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
]
