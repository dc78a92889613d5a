"""Equilibrium solver error classes.

Arithmetic failures (InvalidUint, Overflow, Underflow, DivisionByZero) live
in eqsolver.safe_int. These errors cover solver-level preconditions.
"""


class EquilibriumError(Exception):
    """Base error for equilibrium solver operations."""

    pass


class InsufficientReserve(EquilibriumError):
    """Exact-out request asks for at least the pool's whole reserve.

    Attributes:
        asset: Index of the asset requested out (0 or 1)
        reserve: Current reserve of that asset
        amount: Requested output amount
    """

    def __init__(self, asset: int, reserve: int, amount: int) -> None:
        self.asset = asset
        self.reserve = reserve
        self.amount = amount
        super().__init__(
            f"Insufficient reserve of asset{asset} for the swap out operation: "
            f"reserve={reserve}, amount={amount}"
        )
