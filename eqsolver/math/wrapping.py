"""Wrapping 256-bit integer arithmetic.

The curve contract runs a few steps inside `unchecked { }` blocks, where
uint256/int256 arithmetic silently wraps modulo 2^256. A later checked step
(a width validation, a squaring, a checked division) rejects the inputs for
which wrapping would give a wrong answer. Python ints never wrap, so these
helpers emulate the EVM word explicitly. Use them ONLY where the contract is
unchecked; everywhere else use eqsolver.safe_int.

Usage pattern:
    from eqsolver.math.wrapping import W

    # uint256 wrap: (c * x + (PRECISION - c) * x0) mod 2^256
    term = (W(c) * x + (W(PRECISION) - c) * x0).value
"""

from __future__ import annotations

from eqsolver.constants import INT256_MAX

__all__ = [
    "WORD_MODULUS",
    "Word256",
    "W",
    "to_signed",
    "to_unsigned",
    "wrapping_add",
    "wrapping_sub",
    "wrapping_mul",
    "wrapping_signed_sub",
    "wrapping_signed_mul",
]

WORD_MODULUS = 1 << 256


def to_unsigned(value: int) -> int:
    """Reduce any integer to its uint256 word (mod 2^256)."""
    return value % WORD_MODULUS


def to_signed(value: int) -> int:
    """Interpret the 256-bit word of `value` as a two's-complement int256.

    Returns:
        Value folded into [-2^255, 2^255 - 1]
    """
    word = value % WORD_MODULUS
    if word > INT256_MAX:
        return word - WORD_MODULUS
    return word


def wrapping_add(a: int, b: int) -> int:
    """uint256 addition modulo 2^256."""
    return to_unsigned(a + b)


def wrapping_sub(a: int, b: int) -> int:
    """uint256 subtraction; a negative result wraps by adding 2^256."""
    return to_unsigned(a - b)


def wrapping_mul(a: int, b: int) -> int:
    """uint256 multiplication modulo 2^256."""
    return to_unsigned(a * b)


def wrapping_signed_sub(a: int, b: int) -> int:
    """int256 subtraction with two's-complement wraparound."""
    return to_signed(a - b)


def wrapping_signed_mul(a: int, b: int) -> int:
    """int256 multiplication with two's-complement wraparound."""
    return to_signed(a * b)


class Word256:
    """A uint256 EVM word with wrapping operators.

    Arithmetic between a Word256 and an int (or another Word256) always
    reduces modulo 2^256, the way Solidity behaves inside `unchecked`.
    Comparisons use the unsigned reading.

    Attributes:
        value: The unsigned word in [0, 2^256 - 1] (read-only)
        signed: The int256 reading of the same word (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | Word256) -> None:
        """Create a word, reducing `value` modulo 2^256.

        Raises:
            TypeError: If value is not an int or Word256
        """
        if isinstance(value, Word256):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value % WORD_MODULUS
        else:
            raise TypeError(f"Word256 requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        return self._value

    @property
    def signed(self) -> int:
        return to_signed(self._value)

    def __repr__(self) -> str:
        return f"Word256({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    # --- Wrapping arithmetic ---

    def __add__(self, other: Word256 | int) -> Word256:
        return Word256(self._value + _extract_value(other))

    def __radd__(self, other: int) -> Word256:
        return Word256(other + self._value)

    def __sub__(self, other: Word256 | int) -> Word256:
        return Word256(self._value - _extract_value(other))

    def __rsub__(self, other: int) -> Word256:
        return Word256(other - self._value)

    def __mul__(self, other: Word256 | int) -> Word256:
        return Word256(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> Word256:
        return Word256(other * self._value)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Word256):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Word256 | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: Word256 | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: Word256 | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: Word256 | int) -> bool:
        return self._value >= _extract_value(other)


def _extract_value(x: Word256 | int) -> int:
    if isinstance(x, Word256):
        return x._value
    return x


# Convenience alias for concise code
W = Word256
