"""Integer square root used by the inverse curve.

Newton's method over Python ints. The initial guess only affects speed:
small values use the float square root, large values seed from their decimal
digit count so float precision loss never matters.
"""

from __future__ import annotations

import math

# Below 2^52 a float holds the value exactly, so math.sqrt is a safe seed
_FLOAT_SEED_LIMIT = 1 << 52


def _initial_guess(n: int) -> int:
    if n < _FLOAT_SEED_LIMIT:
        # Start just below the root; the first Newton step lands above it
        return int(math.sqrt(n)) - 3

    digits = len(str(n))
    half = digits // 2
    if digits % 2 == 0:
        return 10**half
    return 4 * 10**half


def sqrt(n: int) -> int:
    """Return floor(sqrt(n)) for a non-negative integer.

    Iterates x1 = (n // x0 + x0) // 2 until x1 == x0 or x1 == x0 + 1; the
    latter handles the oscillation between floor and floor + 1 that integer
    Newton iteration shows for n = k^2 + 2k.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Square root of negative integer: {n}")
    if n < 2:
        return n
    if n < 16:
        return int(math.sqrt(n))

    x1 = _initial_guess(n)
    while True:
        x0 = x1
        x1 = (n // x0 + x0) >> 1
        if x1 == x0 or x1 == x0 + 1:
            return x0


def ceil_sqrt(n: int) -> int:
    """Return ceil(sqrt(n))."""
    root = sqrt(n)
    if root * root < n:
        return root + 1
    return root
