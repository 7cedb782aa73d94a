"""
Dense matrix arithmetic.

Immutable Matrix values with shape queries, elementwise and scalar
arithmetic, products, minors, determinant and inverse by cofactor
expansion.

Public API:
    Matrix              - immutable dense matrix
    VectorInput         - tagged flat input
    MatrixInput         - tagged nested (row) input
    as_input(data)      - classify raw data into a tagged input
    dot(a, b)           - generalized vector/matrix product over raw data
    transpose_array(x)  - transpose raw nested data
    determinant(x)      - determinant of a Matrix or raw square data
    inverse(x)          - inverse of a Matrix or raw square data
"""

from pymatrix.matrix.inputs import VectorInput, MatrixInput, as_input
from pymatrix.matrix.matrix import Matrix, determinant, inverse
from pymatrix.matrix._products import dot, transpose_array

__all__ = [
    "Matrix",
    "VectorInput",
    "MatrixInput",
    "as_input",
    "dot",
    "transpose_array",
    "determinant",
    "inverse",
]
