"""Mathematical utilities for the equilibrium curve.

This package provides the integer primitives the curve evaluators use:
- Word256 / wrapping_*: uint256 and int256 arithmetic that wraps like `unchecked`
- sqrt / ceil_sqrt: Newton integer square root
"""

from eqsolver.math.sqrt import ceil_sqrt, sqrt
from eqsolver.math.wrapping import (
    W,
    Word256,
    to_signed,
    to_unsigned,
    wrapping_add,
    wrapping_mul,
    wrapping_signed_mul,
    wrapping_signed_sub,
    wrapping_sub,
)

__all__ = [
    "Word256",
    "W",
    "to_signed",
    "to_unsigned",
    "wrapping_add",
    "wrapping_sub",
    "wrapping_mul",
    "wrapping_signed_sub",
    "wrapping_signed_mul",
    "sqrt",
    "ceil_sqrt",
]
