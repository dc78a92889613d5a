"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from eqsolver.pool import CurvePool
from tests.helpers import make_pool


@pytest.fixture
def balanced_pool() -> CurvePool:
    """1.0 / 1.0 pool at unit prices with full concentration (constant sum)."""
    return make_pool()


@pytest.fixture
def constant_product_pool() -> CurvePool:
    """1000 / 1000 pool at unit prices with zero concentration."""
    return make_pool(reserve0=1000, reserve1=1000, concentration0=0, concentration1=0)


@pytest.fixture
def golden_request() -> dict[str, Any]:
    """The reference quote request as JSON (camelCase, decimal strings)."""
    one = str(10**18)
    return {
        "amount": "1000",
        "exactIn": True,
        "asset0IsInput": True,
        "reserve0": one,
        "reserve1": one,
        "price0": one,
        "price1": one,
        "concentration0": one,
        "concentration1": one,
    }
