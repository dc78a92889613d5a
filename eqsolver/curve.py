"""Equilibrium curve evaluators.

The curve is centered on an equilibrium point (x0, y0). On the side of the
curve where x <= x0 the required y is given in closed form by `f`. The other
side is reached by solving the same curve for the opposite asset, which is a
quadratic in x handled by `f_inverse`.

Every division rounds up so rounding never favors the trader. Steps the
contract runs `unchecked` use Word256 wrapping; everything else is checked.
"""

from __future__ import annotations

from eqsolver.constants import CURVE_V_BITS, PRECISION
from eqsolver.math.sqrt import ceil_sqrt
from eqsolver.math.wrapping import W, wrapping_signed_mul, wrapping_signed_sub
from eqsolver.safe_int import (
    DivisionByZero,
    ceil_div,
    check_valid_uint,
    int_ceil_div,
    uint_add,
    uint_mul,
)

__all__ = ["f", "f_inverse"]


def _div_trunc(a: int, b: int) -> int:
    """Signed division truncating toward zero (EVM `sdiv`).

    Python's // floors toward -inf; for operands of different signs the
    quotient must be truncated explicitly.

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Signed division by zero: {a}")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def f(x: int, px: int, py: int, x0: int, y0: int, c: int) -> int:
    """Evaluate the curve for x <= x0, returning the required y.

    Formula:
        y = y0 + ceil(ceil(px * (x0 - x) * (c * x + (1 - c) * x0) / x) / py)

    with c and the inner `1` scaled by PRECISION.

    Args:
        x: New reserve of the priced asset (must be <= x0)
        px: Price of the x asset
        py: Price of the y asset
        x0: Equilibrium reserve of the x asset
        y0: Equilibrium reserve of the y asset
        c: Concentration of the x asset

    Returns:
        The y reserve required to keep the pool on the curve

    Raises:
        InvalidUint: If the intermediate exceeds 248 bits or a quotient 256 bits
        DivisionByZero: If x or py is zero
    """
    # Both factors are computed unchecked on-chain; the 248-bit check on v
    # rejects the inputs where wrapping would matter.
    price_delta = (W(px) * (x0 - x)).value
    weighted_reserve = (W(c) * x + (W(PRECISION) - c) * x0).value

    v = ceil_div(price_delta * weighted_reserve, x * PRECISION)
    check_valid_uint(v, CURVE_V_BITS)

    return y0 + ceil_div(v, py)


def f_inverse(y: int, px: int, py: int, x0: int, y0: int, c: int) -> int:
    """Solve the curve for x given y > y0.

    Rearranging the curve gives the quadratic

        c * x^2 + B * x - C = 0

    where B = py * (y - y0) / px - (2c - 1) * x0 and C = (1 - c) * x0^2,
    all in PRECISION units. The positive root is taken with whichever of the
    two algebraically equivalent forms avoids subtracting nearly equal
    numbers:

        B <= 0:  x = (|B| + sqrt(B^2 + 4AC)) / 2c
        B >  0:  x = 2C / (B + sqrt(B^2 + 4AC))

    One unit is added to the result so the pool keeps the rounding error.

    Args:
        y: New reserve of the supplied asset (above its equilibrium y0)
        px: Price of the x asset
        py: Price of the y asset
        x0: Equilibrium reserve of the x asset
        y0: Equilibrium reserve of the y asset
        c: Concentration of the x asset

    Returns:
        The new x reserve, never above x0

    Raises:
        InvalidUint: If a checked step overflows
        DivisionByZero: If px is zero, or c is zero while B <= 0
    """
    term1 = int_ceil_div((W(py) * PRECISION).value * (W(y) - y0).value, px)
    # Non-negative by construction; the contract reverts past uint256
    check_valid_uint(term1)
    term2 = wrapping_signed_mul(wrapping_signed_mul(2, c) - PRECISION, x0)
    b_coef = _div_trunc(wrapping_signed_sub(term1, term2), PRECISION)

    c_coef = ceil_div((W(PRECISION) - c).value * x0 * x0, PRECISION)
    four_ac = ceil_div(4 * c * c_coef, PRECISION)

    abs_b = abs(b_coef)
    discriminant = b_coef * b_coef + four_ac
    root = ceil_sqrt(discriminant)

    if b_coef <= 0:
        x = uint_add(ceil_div((abs_b + root) * PRECISION, uint_mul(2, c)), 1)
    else:
        x = uint_add(ceil_div(uint_mul(2, c_coef), uint_add(abs_b, root)), 1)

    if x >= x0:
        return x0
    return x
