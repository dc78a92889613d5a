"""Tests for checked integer arithmetic."""

import pytest

from eqsolver.safe_int import (
    DivisionByZero,
    InvalidUint,
    Overflow,
    SafeIntError,
    Underflow,
    ceil_div,
    check_valid_uint,
    int_ceil_div,
    is_valid_uint,
    max_uint,
    uint_add,
    uint_mul,
    uint_sub,
)
from tests.helpers import UINT112_LIMIT, UINT256_LIMIT


class TestErrorHierarchy:
    """Checked-arithmetic failures surface as InvalidUint."""

    def test_overflow_is_invalid_uint(self):
        assert issubclass(Overflow, InvalidUint)

    def test_underflow_is_invalid_uint(self):
        assert issubclass(Underflow, InvalidUint)

    def test_all_are_arithmetic_errors(self):
        """Errors derive from ArithmeticError via SafeIntError."""
        for exc in (InvalidUint, Overflow, Underflow, DivisionByZero):
            assert issubclass(exc, SafeIntError)
            assert issubclass(exc, ArithmeticError)

    def test_invalid_uint_carries_context(self):
        err = InvalidUint(UINT112_LIMIT, 112, "reserve0")
        assert err.value == UINT112_LIMIT
        assert err.bits == 112
        assert err.name == "reserve0"
        assert "reserve0" in str(err)
        assert "uint112" in str(err)

    def test_negative_message(self):
        err = InvalidUint(-5)
        assert "cannot be negative" in str(err)
        assert err.bits == 256


class TestCheckValidUint:
    """Tests for width validation."""

    def test_zero_is_valid(self):
        assert check_valid_uint(0) == 0

    def test_max_uint256_is_valid(self):
        assert check_valid_uint(UINT256_LIMIT - 1) == UINT256_LIMIT - 1

    def test_uint256_limit_raises(self):
        with pytest.raises(InvalidUint) as exc_info:
            check_valid_uint(UINT256_LIMIT)
        assert exc_info.value.bits == 256

    def test_negative_raises(self):
        with pytest.raises(InvalidUint):
            check_valid_uint(-1)

    def test_custom_width(self):
        assert check_valid_uint(UINT112_LIMIT - 1, 112) == UINT112_LIMIT - 1
        with pytest.raises(InvalidUint):
            check_valid_uint(UINT112_LIMIT, 112)

    def test_248_bit_width(self):
        assert check_valid_uint(2**248 - 1, 248) == 2**248 - 1
        with pytest.raises(InvalidUint):
            check_valid_uint(2**248, 248)

    def test_name_is_reported(self):
        with pytest.raises(InvalidUint) as exc_info:
            check_valid_uint(-1, name="amount")
        assert exc_info.value.name == "amount"

    def test_is_valid_uint_does_not_raise(self):
        assert is_valid_uint(5)
        assert not is_valid_uint(-1)
        assert not is_valid_uint(UINT112_LIMIT, 112)

    def test_max_uint(self):
        assert max_uint() == UINT256_LIMIT - 1
        assert max_uint(112) == UINT112_LIMIT - 1


class TestCheckedOperations:
    """Tests for uint_add / uint_sub / uint_mul."""

    def test_add(self):
        assert uint_add(10, 5) == 15

    def test_add_at_limit(self):
        assert uint_add(UINT256_LIMIT - 2, 1) == UINT256_LIMIT - 1

    def test_add_overflow_raises(self):
        with pytest.raises(Overflow):
            uint_add(UINT256_LIMIT - 1, 1)

    def test_add_overflow_custom_width(self):
        with pytest.raises(Overflow):
            uint_add(UINT112_LIMIT - 1, 1, 112)

    def test_sub(self):
        assert uint_sub(10, 3) == 7
        assert uint_sub(5, 5) == 0

    def test_sub_underflow_raises(self):
        with pytest.raises(Underflow) as exc_info:
            uint_sub(5, 10)
        assert exc_info.value.value == -5

    def test_mul(self):
        assert uint_mul(6, 7) == 42

    def test_mul_overflow_raises(self):
        with pytest.raises(Overflow):
            uint_mul(2**128, 2**128)

    def test_mul_just_fits(self):
        assert uint_mul(2**128 - 1, 2**128 + 1) == UINT256_LIMIT - 1

    def test_overflow_caught_as_invalid_uint(self):
        """Callers catching InvalidUint also see checked-arithmetic failures."""
        with pytest.raises(InvalidUint):
            uint_mul(2, UINT256_LIMIT - 1)


class TestCeilDiv:
    """Tests for ceiling division."""

    def test_exact(self):
        assert ceil_div(10, 5) == 2

    def test_rounds_up(self):
        assert ceil_div(10, 3) == 4
        assert ceil_div(1, 10**18) == 1

    def test_zero_numerator(self):
        assert ceil_div(0, 7) == 0

    def test_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            ceil_div(10, 0)

    def test_quotient_width_checked(self):
        with pytest.raises(InvalidUint):
            ceil_div(UINT256_LIMIT * 2, 1)

    def test_quotient_custom_width(self):
        assert ceil_div(2**249 - 3, 2, 248) == 2**248 - 1
        with pytest.raises(InvalidUint):
            ceil_div(2**249 - 1, 2, 248)

    def test_int_ceil_div_is_unbounded(self):
        """int_ceil_div never checks the quotient width."""
        assert int_ceil_div(UINT256_LIMIT * 3, 1) == UINT256_LIMIT * 3

    def test_int_ceil_div_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            int_ceil_div(1, 0)
