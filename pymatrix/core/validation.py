"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No silent reshaping: ragged rows are an error, never padded
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidShapeError,
    NotSquareError,
    NumericalError,
    ShapeMismatchError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types,
    ragged nesting or non-numeric data) and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is a numpy number subtype; matrices of truth values are not supported
    if result.dtype == bool or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_finite_result(array: NDArray[np.floating[Any]], operation: str) -> None:
    """
    Verify a computed result stayed finite.

    Finite operands can still overflow float64 (1e308 * 10). Inputs are
    checked by check_finite; this guards the outputs.

    Raises:
        NumericalError: If any entry is NaN or Inf
    """
    if not np.all(np.isfinite(array)):
        raise NumericalError(
            f"{operation}: result contains non-finite values (float64 overflow)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> int:
    """
    Verify nested rows are non-empty and all share the first row's length.

    Runs before numpy conversion so that the error names the offending row
    instead of surfacing numpy's "inhomogeneous shape" message.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        The common row length (number of columns)

    Raises:
        InvalidShapeError: If there are no rows, the first row is empty,
            any row length differs from the first, or an entry is itself
            a sequence
    """
    if len(rows) == 0:
        raise InvalidShapeError(f"{name}: requires at least 1 row, got 0")

    expected = len(rows[0])
    if expected == 0:
        raise InvalidShapeError(
            f"{name}: requires at least 1 column, got 0",
            row_index=0, expected_length=None, actual_length=0,
        )

    for i, row in enumerate(rows):
        if len(row) != expected:
            raise InvalidShapeError(
                f"{name}: row {i} has length {len(row)}, expected {expected} "
                f"(from row 0)",
                row_index=i, expected_length=expected, actual_length=len(row),
            )
        for j, item in enumerate(row):
            if _is_sequence(item):
                raise InvalidShapeError(
                    f"{name}: entry ({i}, {j}) is a sequence, expected a scalar",
                    row_index=i,
                )

    return expected


def _is_sequence(item: Any) -> bool:
    if isinstance(item, np.ndarray):
        return item.ndim > 0
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes))


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element along every axis.

    Raises:
        InvalidShapeError: If any dimension has length zero
    """
    if array.size == 0:
        raise InvalidShapeError(f"{name}: empty data with shape {array.shape}")


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a 2D shape is square.

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise NotSquareError(
            f"{name}: requires a square matrix, got {rows}x{columns}",
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes for an elementwise operation.

    Raises:
        ShapeMismatchError: If shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ, left {left} vs right {right}",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the last axis of `left` matches the first axis of `right`.

    Raises:
        ShapeMismatchError: If inner dimensions differ
    """
    if left[-1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: inner dimensions differ, left {left} has {left[-1]} "
            f"but right {right} has {right[0]}",
            operation=operation, left_shape=left, right_shape=right,
        )


def check_index(
    index: Any,
    bound: int,
    axis: str,
    name: str,
    error_cls: type[IndexOutOfRangeError] = IndexOutOfRangeError,
) -> int:
    """
    Verify an index is an integer in [0, bound).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        axis: 'row' or 'column', for error messages and diagnostics
        name: Parameter name for error messages
        error_cls: IndexOutOfRangeError subclass to raise

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)):
        raise ValidationError(f"{name}: {axis} index must be an integer, got bool")
    try:
        idx = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: {axis} index must be an integer, got {type(index).__name__}"
        ) from e

    if idx < 0 or idx >= bound:
        raise error_cls(
            f"{name}: {axis} index {idx} out of range [0, {bound})",
            index=idx, bound=bound, axis=axis,
        )
    return idx


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a finite real scalar.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: scalar must be finite, got {result}")
    return result
