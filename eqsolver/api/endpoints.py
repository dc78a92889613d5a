"""API endpoints for equilibrium curve quotes."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from eqsolver.models import BatchQuoteRequest, BatchQuoteResponse, QuoteRequest, QuoteResponse
from eqsolver.quoter import QuoteFailure, Quoter, error_kind, get_default_quoter

logger = structlog.get_logger()

router = APIRouter()


def get_quoter() -> Quoter:
    """Dependency provider for the quoter instance.

    Override this in tests to inject a custom quoter:
        app.dependency_overrides[get_quoter] = lambda: Quoter(config)
    """
    return get_default_quoter()


@router.post("/quote")
async def quote(
    request: QuoteRequest,
    quoter_instance: Quoter = Depends(get_quoter),
) -> QuoteResponse:
    """Quote one swap.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Solver rejection (the contract would revert): 400 with
          {"error": <kind>, "message": <text>} as detail
    """
    logger.info(
        "received_quote",
        exact_in=request.exact_in,
        asset0_is_input=request.asset0_is_input,
    )
    try:
        return quoter_instance.quote(request)
    except QuoteFailure as exc:
        raise HTTPException(
            status_code=400,
            detail={"error": error_kind(exc), "message": str(exc)},
        ) from exc


@router.post("/quote/batch", response_model_exclude_none=True)
async def quote_batch(
    batch: BatchQuoteRequest,
    quoter_instance: Quoter = Depends(get_quoter),
) -> BatchQuoteResponse:
    """Quote several independent swaps; failures are reported per entry."""
    logger.info("received_quote_batch", count=len(batch.quotes))
    try:
        return quoter_instance.quote_batch(batch.quotes)
    except ValueError as exc:
        logger.warning("quote_batch_rejected", count=len(batch.quotes), reason=str(exc))
        raise HTTPException(status_code=413, detail=str(exc)) from exc
