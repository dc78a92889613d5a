"""Checked integer arithmetic mirroring EVM reverting operations.

Solidity >=0.8 reverts whenever an arithmetic result does not fit the
declared integer type. The helpers here reproduce that behavior on Python
ints so off-chain quotes fail in exactly the places the contract reverts:
- Results outside [0, 2^bits - 1] raise InvalidUint (Overflow / Underflow)
- Division by zero raises DivisionByZero (EVM panic 0x12)

Usage pattern:
    from eqsolver.safe_int import check_valid_uint, uint_add, ceil_div

    def step(a: int, b: int, d: int) -> int:
        total = uint_add(a, b)           # Raises Overflow past 2^256 - 1
        return ceil_div(total, d, 248)   # Raises if the quotient needs > 248 bits
"""

from __future__ import annotations

from eqsolver.constants import UINT256_BITS


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic errors."""

    pass


class InvalidUint(SafeIntError):
    """Value is negative or does not fit an unsigned integer of the given width.

    Attributes:
        value: The offending value
        bits: Declared width of the unsigned type
        name: Parameter name, when the value came from a named input
    """

    def __init__(self, value: int, bits: int = UINT256_BITS, name: str | None = None) -> None:
        self.value = value
        self.bits = bits
        self.name = name
        label = f"{name} " if name else ""
        if value < 0:
            message = f"Value {label}cannot be negative: {value}"
        else:
            message = f"Value {label}exceeds maximum for uint{bits}: {value}"
        super().__init__(message)


class Overflow(InvalidUint):
    """Checked operation produced a result wider than its type."""

    pass


class Underflow(InvalidUint):
    """Checked operation produced a negative result."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero (the EVM panics instead of returning 0 in checked code)."""

    pass


def max_uint(bits: int = UINT256_BITS) -> int:
    """Largest value representable by an unsigned integer of `bits` width."""
    return (1 << bits) - 1


def is_valid_uint(value: int, bits: int = UINT256_BITS) -> bool:
    """Check if value fits uint<bits> without raising."""
    return 0 <= value <= max_uint(bits)


def check_valid_uint(value: int, bits: int = UINT256_BITS, name: str | None = None) -> int:
    """Validate that value fits an unsigned integer of `bits` width.

    Args:
        value: Value to validate
        bits: Width of the unsigned type (default 256)
        name: Optional parameter name included in the error

    Returns:
        The value unchanged

    Raises:
        InvalidUint: If value is negative or exceeds 2^bits - 1
    """
    if value < 0 or value > max_uint(bits):
        raise InvalidUint(value, bits, name)
    return value


def _checked(result: int, bits: int) -> int:
    if result < 0:
        raise Underflow(result, bits)
    if result > max_uint(bits):
        raise Overflow(result, bits)
    return result


def uint_add(a: int, b: int, bits: int = UINT256_BITS) -> int:
    """Checked addition.

    Raises:
        Overflow: If a + b exceeds 2^bits - 1
        Underflow: If a + b is negative
    """
    return _checked(a + b, bits)


def uint_sub(a: int, b: int, bits: int = UINT256_BITS) -> int:
    """Checked subtraction.

    Raises:
        Underflow: If b > a
        Overflow: If a - b exceeds 2^bits - 1
    """
    return _checked(a - b, bits)


def uint_mul(a: int, b: int, bits: int = UINT256_BITS) -> int:
    """Checked multiplication.

    Raises:
        Overflow: If a * b exceeds 2^bits - 1
        Underflow: If a * b is negative
    """
    return _checked(a * b, bits)


def int_ceil_div(numerator: int, denominator: int) -> int:
    """Ceiling division without a width check.

    Equivalent to: (numerator + denominator - 1) // denominator

    Raises:
        DivisionByZero: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZero(f"Ceiling division by zero: {numerator}")
    return (numerator + denominator - 1) // denominator


def ceil_div(numerator: int, denominator: int, bits: int = UINT256_BITS) -> int:
    """Ceiling division whose quotient must fit uint<bits>.

    Raises:
        DivisionByZero: If denominator is zero
        InvalidUint: If the quotient does not fit `bits`
    """
    return check_valid_uint(int_ceil_div(numerator, denominator), bits)
