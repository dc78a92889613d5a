"""Equilibrium curve solver - off-chain reference model of the on-chain swap math."""

from eqsolver.curve import f, f_inverse
from eqsolver.equilibrium import find_equilibrium_point
from eqsolver.errors import EquilibriumError, InsufficientReserve
from eqsolver.pool import CurvePool
from eqsolver.safe_int import DivisionByZero, InvalidUint, Overflow, SafeIntError, Underflow

__version__ = "0.1.0"
__all__ = [
    "find_equilibrium_point",
    "f",
    "f_inverse",
    "CurvePool",
    "EquilibriumError",
    "InsufficientReserve",
    "SafeIntError",
    "InvalidUint",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "__version__",
]
