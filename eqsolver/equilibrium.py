"""Equilibrium point solver.

Entry point that mirrors the contract's quote path: validate inputs, move
one reserve by the requested amount, solve the curve for the other reserve
and return the difference as the swap amount.

The equilibrium reserves are always the current reserves, so the curve is
re-centered on the present pool state before every trade.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from eqsolver.constants import RESERVE_BITS
from eqsolver.curve import f, f_inverse
from eqsolver.errors import InsufficientReserve
from eqsolver.safe_int import check_valid_uint, uint_add

logger = structlog.get_logger()


@dataclass(frozen=True)
class _Side:
    """One asset's view of the curve."""

    index: int
    reserve: int
    equilibrium_reserve: int
    price: int
    concentration: int


def _solve_counter_reserve(new_reserve: int, primary: _Side, secondary: _Side) -> int:
    """Return the secondary reserve that keeps the pool on the curve.

    `primary` is the side whose reserve moved to `new_reserve`. At or below
    its equilibrium the forward curve applies directly; above it the curve is
    solved from the secondary side instead.
    """
    if new_reserve <= primary.equilibrium_reserve:
        logger.debug("curve_branch", branch="f", primary_asset=primary.index)
        return f(
            new_reserve,
            primary.price,
            secondary.price,
            primary.equilibrium_reserve,
            secondary.equilibrium_reserve,
            primary.concentration,
        )

    logger.debug("curve_branch", branch="f_inverse", primary_asset=primary.index)
    return f_inverse(
        new_reserve,
        secondary.price,
        primary.price,
        secondary.equilibrium_reserve,
        primary.equilibrium_reserve,
        secondary.concentration,
    )


def find_equilibrium_point(
    amount: int,
    exact_in: bool,
    asset0_is_input: bool,
    reserve0: int,
    reserve1: int,
    price0: int,
    price1: int,
    concentration0: int,
    concentration1: int,
) -> int:
    """Compute the counter amount of a swap on the equilibrium curve.

    Args:
        amount: Amount swapped in (exact_in) or out (not exact_in). Uint256.
        exact_in: True if amount is supplied to the pool, False if requested from it
        asset0_is_input: True if asset0 is the asset the trader supplies
        reserve0: Pool reserve of asset0. Uint112.
        reserve1: Pool reserve of asset1. Uint112.
        price0: Price of asset0 (priceX on-chain). Uint256.
        price1: Price of asset1 (priceY on-chain). Uint256.
        concentration0: Concentration of asset0 (concentrationX on-chain). Uint256.
        concentration1: Concentration of asset1 (concentrationY on-chain). Uint256.

    Returns:
        Amount out for exact-in swaps, amount in for exact-out swaps.
        Never negative.

    Raises:
        InvalidUint: If an input exceeds its width or a checked step overflows
        InsufficientReserve: If an exact-out amount is not below the reserve
        DivisionByZero: If a curve division has a zero divisor
    """
    # Same order as the contract
    check_valid_uint(amount, name="amount")
    check_valid_uint(price0, name="price0")
    check_valid_uint(price1, name="price1")
    check_valid_uint(concentration0, name="concentration0")
    check_valid_uint(concentration1, name="concentration1")
    check_valid_uint(reserve0, RESERVE_BITS, name="reserve0")
    check_valid_uint(reserve1, RESERVE_BITS, name="reserve1")

    side0 = _Side(0, reserve0, reserve0, price0, concentration0)
    side1 = _Side(1, reserve1, reserve1, price1, concentration1)

    if exact_in:
        # The input side grows by amount; the other side pays out
        primary, secondary = (side0, side1) if asset0_is_input else (side1, side0)
        new_reserve = uint_add(primary.reserve, amount)
        counter = _solve_counter_reserve(new_reserve, primary, secondary)
        output = max(secondary.reserve - counter, 0)
    else:
        # The output side shrinks by amount; the input side must grow
        primary, secondary = (side1, side0) if asset0_is_input else (side0, side1)
        if primary.reserve <= amount:
            raise InsufficientReserve(primary.index, primary.reserve, amount)
        new_reserve = primary.reserve - amount
        counter = _solve_counter_reserve(new_reserve, primary, secondary)
        output = max(counter - secondary.reserve, 0)

    return check_valid_uint(output)
