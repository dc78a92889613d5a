"""Quoting service on top of the equilibrium solver.

Wraps find_equilibrium_point for request/response callers (the HTTP API and
scripts), translating solver failures into QuoteError entries.
"""

from __future__ import annotations

import structlog

from eqsolver.config import DEFAULT_QUOTER_CONFIG, QuoterConfig
from eqsolver.errors import EquilibriumError, InsufficientReserve
from eqsolver.models import (
    BatchQuoteResponse,
    QuoteError,
    QuoteRequest,
    QuoteResponse,
    QuoteResult,
)
from eqsolver.safe_int import DivisionByZero, InvalidUint, SafeIntError

logger = structlog.get_logger()

# Exceptions that mean "the contract would revert", not a bug
QuoteFailure = (SafeIntError, EquilibriumError)


def error_kind(exc: Exception) -> str:
    """Map a solver exception to its failure kind.

    Overflow and Underflow are reported as InvalidUint, which is how the
    contract surfaces them.
    """
    if isinstance(exc, InvalidUint):
        return "InvalidUint"
    if isinstance(exc, InsufficientReserve):
        return "InsufficientReserve"
    if isinstance(exc, DivisionByZero):
        return "DivisionByZero"
    return type(exc).__name__


class Quoter:
    """Evaluates quote requests against the equilibrium curve."""

    def __init__(self, config: QuoterConfig | None = None) -> None:
        self.config = config or DEFAULT_QUOTER_CONFIG

    def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Quote a single request.

        Raises:
            InvalidUint, InsufficientReserve, DivisionByZero: As raised by the solver
        """
        pool = request.to_pool()
        try:
            amount = pool.quote(request.amount, request.exact_in, request.asset0_is_input)
        except QuoteFailure as exc:
            if self.config.log_rejections:
                logger.info(
                    "quote_rejected",
                    error=error_kind(exc),
                    reason=str(exc),
                    exact_in=request.exact_in,
                    asset0_is_input=request.asset0_is_input,
                )
            raise
        return QuoteResponse(amount=str(amount))

    def try_quote(self, request: QuoteRequest) -> QuoteResult:
        """Quote a request, reporting solver failures in the result."""
        try:
            response = self.quote(request)
        except QuoteFailure as exc:
            return QuoteResult(error=QuoteError(error=error_kind(exc), message=str(exc)))
        return QuoteResult(amount=response.amount)

    def quote_batch(self, requests: list[QuoteRequest]) -> BatchQuoteResponse:
        """Quote independent requests in order.

        Raises:
            ValueError: If more than config.max_batch_size requests are given
        """
        if len(requests) > self.config.max_batch_size:
            raise ValueError(
                f"Batch of {len(requests)} quotes exceeds limit of {self.config.max_batch_size}"
            )
        results = [self.try_quote(request) for request in requests]
        logger.debug(
            "batch_quoted",
            count=len(results),
            failures=sum(1 for r in results if not r.ok),
        )
        return BatchQuoteResponse(results=results)


def get_default_quoter() -> Quoter:
    """Return the shared quoter instance."""
    return quoter


quoter = Quoter()
