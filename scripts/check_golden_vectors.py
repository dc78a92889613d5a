#!/usr/bin/env python3
"""Re-evaluate recorded equilibrium curve vectors.

Each vector holds a quote request and either the expected amount or the
expected failure kind, typically recorded from the deployed contract. The
script quotes every request locally and reports any divergence.

Usage:
    python scripts/check_golden_vectors.py
    python scripts/check_golden_vectors.py --vectors path/to/vectors.json -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from eqsolver.config import QuoterConfig
from eqsolver.models import QuoteRequest
from eqsolver.quoter import Quoter

logger = structlog.get_logger()

DEFAULT_VECTORS = Path("tests/fixtures/golden_vectors.json")


def check_vector(quoter: Quoter, vector: dict[str, Any]) -> str | None:
    """Quote one vector.

    Returns:
        None if it matches, otherwise a description of the mismatch
    """
    request = QuoteRequest.model_validate(vector["request"])
    result = quoter.try_quote(request)

    if "error" in vector:
        if result.error is None:
            return f"expected {vector['error']}, got amount {result.amount}"
        if result.error.error != vector["error"]:
            return f"expected {vector['error']}, got {result.error.error}"
        return None

    if result.error is not None:
        return f"expected {vector['expected']}, got {result.error.error}: {result.error.message}"
    if result.amount != vector["expected"]:
        return f"expected {vector['expected']}, got {result.amount}"
    return None


def main() -> int:
    parser = argparse.ArgumentParser(description="Check recorded equilibrium curve vectors")
    parser.add_argument(
        "--vectors",
        type=Path,
        default=DEFAULT_VECTORS,
        help=f"Vectors file (default: {DEFAULT_VECTORS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if not args.vectors.exists():
        logger.error("vectors_file_not_found", path=str(args.vectors))
        return 1

    with open(args.vectors) as fh:
        vectors = json.load(fh)["vectors"]

    # Rejections are expected for error vectors; keep the output readable
    quoter = Quoter(QuoterConfig(log_rejections=args.verbose))

    failures = 0
    for vector in vectors:
        mismatch = check_vector(quoter, vector)
        if mismatch is None:
            logger.debug("vector_ok", name=vector["name"])
        else:
            failures += 1
            logger.error("vector_mismatch", name=vector["name"], detail=mismatch)

    logger.info("vectors_checked", total=len(vectors), failures=failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
