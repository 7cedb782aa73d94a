"""
PyMatrix: immutable dense matrix arithmetic for Python.

The numeric foundation for regression, classification and dimensionality
reduction code: construction from nested or flat data, shape queries,
and a closed set of algebraic operations (transpose, products,
determinant, inverse, minors).

Submodules:
    matrix: Matrix value type and raw-data helpers
    core: Exceptions, validators, tolerance tiers
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pymatrix import matrix
from pymatrix.matrix import Matrix, dot, transpose_array, determinant, inverse

__all__ = [
    "__version__",
    "matrix",
    "Matrix",
    "dot",
    "transpose_array",
    "determinant",
    "inverse",
]
