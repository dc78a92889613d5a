"""Test helpers module for shared test utilities.

- constants: Fixed-point units and width limits
- factories: CurvePool factory functions
- vectors: Recorded quote vectors
"""

from tests.helpers.constants import ONE, UINT112_LIMIT, UINT256_LIMIT
from tests.helpers.factories import make_pool, quote_all_directions
from tests.helpers.vectors import load_golden_vectors

__all__ = [
    "ONE",
    "UINT112_LIMIT",
    "UINT256_LIMIT",
    "make_pool",
    "quote_all_directions",
    "load_golden_vectors",
]
