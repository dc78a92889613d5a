"""Pydantic models for quote requests and responses.

Integers travel as decimal strings (JSON numbers lose precision past 2^53).
Only the syntax is validated here; widths and signs are left to the solver
so its error ordering is preserved.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from eqsolver.pool import CurvePool


def validate_int_string(value: Any) -> int:
    """Parse an integer given as int or decimal string.

    Raises:
        ValueError: If value is not an int or a decimal integer string
    """
    if isinstance(value, bool):
        raise ValueError("Integer field must not be a boolean")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Integer field must be string or int, got {type(value).__name__}")
    try:
        return int(value, 10)
    except ValueError as err:
        raise ValueError(f"Integer field must be a decimal integer string: '{value}'") from err


# Arbitrary-size integer as decimal string (range checked by the solver)
IntString = Annotated[
    int,
    BeforeValidator(validate_int_string),
    Field(description="Integer as decimal string"),
]


class QuoteRequest(BaseModel):
    """A single swap quote against an equilibrium curve pool."""

    amount: IntString = Field(description="Amount in (exactIn) or out (not exactIn)")
    exact_in: bool = Field(alias="exactIn")
    asset0_is_input: bool = Field(alias="asset0IsInput")
    reserve0: IntString
    reserve1: IntString
    price0: IntString
    price1: IntString
    concentration0: IntString
    concentration1: IntString

    model_config = {"populate_by_name": True}

    def to_pool(self) -> CurvePool:
        return CurvePool(
            reserve0=self.reserve0,
            reserve1=self.reserve1,
            price0=self.price0,
            price1=self.price1,
            concentration0=self.concentration0,
            concentration1=self.concentration1,
        )


class QuoteError(BaseModel):
    """Why a quote was rejected.

    `error` is the failure kind: InvalidUint, InsufficientReserve or
    DivisionByZero.
    """

    error: str
    message: str


class QuoteResponse(BaseModel):
    """Quoted counter amount as decimal string."""

    amount: str


class QuoteResult(BaseModel):
    """One entry of a batch response: either an amount or an error."""

    amount: str | None = None
    error: QuoteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchQuoteRequest(BaseModel):
    """Several independent quotes evaluated in order."""

    quotes: list[QuoteRequest] = Field(default_factory=list)


class BatchQuoteResponse(BaseModel):
    """Results in the same order as the request."""

    results: list[QuoteResult] = Field(default_factory=list)
