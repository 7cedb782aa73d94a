"""
Tolerance tiers and numerical limits for matrix arithmetic.

Defines precision expectations for the cofactor-expansion compute path:
- EXACT: integer-valued inputs whose products and sums stay exact in float64
- COFACTOR_FP64: fractional inputs, where summation order in the Laplace
  expansion perturbs the least-significant digits

Used by the test suite, Matrix.allclose(), and the singularity and
cost checks in determinant/inverse.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer fixtures: results must be bit-exact
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer-valued data, exact in float64',
)

# Fractional fixtures: reference tolerance for determinant/inverse results
COFACTOR_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-4,
    name='cofactor_fp64',
    description='Double precision Laplace expansion, fractional entries',
)

# |det| <= SINGULAR_TOL is treated as singular. Zero means only an exact
# zero determinant is rejected.
SINGULAR_TOL = 0.0

# Above this size cofactor expansion (O(n!)) emits a RuntimeWarning.
COFACTOR_WARN_SIZE = 8


def select_tolerance(is_fractional: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for the kind of input data."""
    if is_fractional:
        return COFACTOR_FP64
    return EXACT
