"""
Tagged input variants for matrix construction and dot products.

Raw Python data is ambiguous: [1, 2, 3] could be a row, a column or a
vector. Every public entry point classifies its raw input exactly once,
here, into one of two explicit tags:

    VectorInput  - a flat, non-empty sequence of scalars (1D)
    MatrixInput  - a non-empty rectangular sequence of rows (2D)

Downstream code dispatches on the tag and never re-inspects nesting.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidShapeError, ValidationError
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
    check_rectangular,
)


def _freeze(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class VectorInput:
    """
    A flat sequence of N finite scalars.

    Construction validates and copies the data into a read-only float64
    array of shape (N,).
    """
    values: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        arr = check_array(self.values, "vector")
        check_1d(arr, "vector")
        check_not_empty(arr, "vector")
        check_finite(arr, "vector")
        object.__setattr__(self, 'values', _freeze(arr))

    @property
    def size(self) -> int:
        """Number of elements."""
        return int(self.values.shape[0])

    def __repr__(self) -> str:
        return f"VectorInput(size={self.size})"


@dataclass(frozen=True, eq=False)
class MatrixInput:
    """
    A rectangular grid of finite scalars, given as a sequence of rows.

    Ragged rows raise InvalidShapeError naming the first offending row.
    """
    rows: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        data = self.rows
        if not isinstance(data, np.ndarray):
            check_rectangular(data, "matrix")
        arr = check_array(data, "matrix")
        if arr.ndim != 2:
            raise InvalidShapeError(
                f"matrix: expected rows of scalars (2D), got {arr.ndim}D with shape {arr.shape}"
            )
        check_not_empty(arr, "matrix")
        check_finite(arr, "matrix")
        object.__setattr__(self, 'rows', _freeze(arr))

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        n, p = self.rows.shape
        return int(n), int(p)

    def __repr__(self) -> str:
        n, p = self.shape
        return f"MatrixInput(rows={n}, columns={p})"


TaggedInput = Union[VectorInput, MatrixInput]


def _is_row(item: Any) -> bool:
    if isinstance(item, np.ndarray):
        return item.ndim >= 1
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes))


def as_input(data: ArrayLike | TaggedInput, name: str = "data") -> TaggedInput:
    """
    Classify raw data as a VectorInput or MatrixInput.

    Already-tagged inputs pass through unchanged. Objects exposing
    ``__array__`` (numpy arrays, Matrix) are classified by ndim.

    Args:
        data: Tagged input, numpy array, or (nested) sequence of numbers
        name: Parameter name for error messages

    Returns:
        VectorInput for flat data, MatrixInput for nested data

    Raises:
        InvalidShapeError: Empty data, scalars mixed with rows, nested
            entries, or arrays with ndim other than 1 or 2
        ValidationError: Non-sequence input or non-numeric values
    """
    if isinstance(data, (VectorInput, MatrixInput)):
        return data

    if not isinstance(data, (Sequence, np.ndarray)) and hasattr(data, '__array__'):
        data = np.asarray(data)

    if isinstance(data, np.ndarray):
        if data.ndim == 1:
            return VectorInput(data)
        if data.ndim == 2:
            return MatrixInput(data)
        raise InvalidShapeError(
            f"{name}: expected 1D or 2D array, got {data.ndim}D with shape {data.shape}"
        )

    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of numbers or of rows, got {type(data).__name__}"
        )

    if len(data) == 0:
        raise InvalidShapeError(f"{name}: requires at least 1 element, got 0")

    nested = [_is_row(item) for item in data]
    if all(nested):
        return MatrixInput(data)
    if not any(nested):
        return VectorInput(data)

    first_row = nested.index(True)
    raise InvalidShapeError(
        f"{name}: mixes scalars and rows (element {first_row} is a row, "
        f"element {nested.index(False)} is a scalar)",
        row_index=first_row,
    )
