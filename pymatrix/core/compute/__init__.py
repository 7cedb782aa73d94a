"""
Shared numeric constants for PyMatrix.

Submodules:
    tolerances: Tolerance tiers, singularity threshold, cofactor size limit
"""

from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    COFACTOR_FP64,
    SINGULAR_TOL,
    COFACTOR_WARN_SIZE,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "COFACTOR_FP64",
    "SINGULAR_TOL",
    "COFACTOR_WARN_SIZE",
    "select_tolerance",
]
