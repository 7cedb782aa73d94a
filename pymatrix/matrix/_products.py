"""
Raw-data transpose and generalized dot product.

Both functions accept raw (nested) sequences, numpy arrays, Matrix
instances or pre-tagged VectorInput/MatrixInput, and dispatch on the tag
produced by as_input().
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import check_finite_result, check_inner_dimensions
from pymatrix.matrix.inputs import MatrixInput, TaggedInput, VectorInput, as_input


def _as_rows(tagged: TaggedInput) -> NDArray[np.floating[Any]]:
    # A vector is a single row wherever a 2D view is needed
    if isinstance(tagged, VectorInput):
        return tagged.values.reshape(1, -1)
    return tagged.rows


def transpose_array(data: ArrayLike | TaggedInput) -> NDArray[np.floating[Any]]:
    """
    Transpose raw nested data without building a Matrix.

    A flat vector of length N is treated as a 1xN row and comes back as an
    Nx1 column.

    Args:
        data: Nested rows, flat vector, ndarray, Matrix or tagged input

    Returns:
        New writeable 2D float64 array of shape (columns, rows)
    """
    rows = _as_rows(as_input(data, "data"))
    return rows.T.copy()


def dot(
    a: ArrayLike | TaggedInput,
    b: ArrayLike | TaggedInput,
) -> NDArray[np.floating[Any]]:
    """
    Generalized product, polymorphic over vectors and matrices.

    - vector(N) . vector(N): [sum_i a[i] * b[i]], shape (1,)
    - matrix(MxK) . vector(K): row inner products, shape (M,)
    - vector(K) . matrix(KxN): column inner products, shape (N,)
    - matrix(MxK) . matrix(KxN): matrix product, shape (M, N)
    - matrix(MxK) . matrix(NxK), M != K: when the product is undefined but
      the rows share a length, every row of a meets every row of b,
      giving a . b^T with shape (M, N)

    Examples:
        >>> dot([2, 2, 2], [3, 3, 3])
        array([18.])
        >>> dot([[1, 1], [2, 2]], [[3, 3], [3, 3], [3, 3]])[:, 0]
        array([ 6., 12.])

    Raises:
        ShapeMismatchError: If neither the inner dimensions nor the row
            lengths agree
        NumericalError: If the result overflows float64
    """
    left = as_input(a, "a")
    right = as_input(b, "b")
    with np.errstate(over='ignore', invalid='ignore'):
        result = _dispatch_dot(left, right)
    check_finite_result(result, "dot")
    return result


def _dispatch_dot(left: TaggedInput, right: TaggedInput) -> NDArray[np.floating[Any]]:
    if isinstance(left, VectorInput) and isinstance(right, VectorInput):
        check_inner_dimensions(left.values.shape, right.values.shape, "dot")
        return np.array([np.sum(left.values * right.values)])

    if isinstance(left, MatrixInput) and isinstance(right, VectorInput):
        check_inner_dimensions(left.shape, right.values.shape, "dot")
        return left.rows @ right.values

    if isinstance(left, VectorInput) and isinstance(right, MatrixInput):
        check_inner_dimensions(left.values.shape, right.shape, "dot")
        return left.values @ right.rows

    if left.shape[1] != right.shape[0] and left.shape[1] == right.shape[1]:
        return left.rows @ right.rows.T
    check_inner_dimensions(left.shape, right.shape, "dot")
    return left.rows @ right.rows
