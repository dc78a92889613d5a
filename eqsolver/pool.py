"""Equilibrium curve pool state."""

from __future__ import annotations

from dataclasses import dataclass

from eqsolver.equilibrium import find_equilibrium_point


@dataclass(frozen=True)
class CurvePool:
    """Snapshot of an equilibrium curve pool.

    The current reserves double as the equilibrium point, so a snapshot is
    all that is needed to quote against the pool.

    Attributes:
        reserve0: Reserve of asset0 (uint112)
        reserve1: Reserve of asset1 (uint112)
        price0: Price weight of asset0, scaled by 1e18
        price1: Price weight of asset1, scaled by 1e18
        concentration0: Curve concentration on the asset0 side, scaled by 1e18
        concentration1: Curve concentration on the asset1 side, scaled by 1e18
    """

    reserve0: int
    reserve1: int
    price0: int
    price1: int
    concentration0: int
    concentration1: int

    def quote(self, amount: int, exact_in: bool, asset0_is_input: bool) -> int:
        """Quote a swap against this pool (see find_equilibrium_point)."""
        return find_equilibrium_point(
            amount,
            exact_in,
            asset0_is_input,
            self.reserve0,
            self.reserve1,
            self.price0,
            self.price1,
            self.concentration0,
            self.concentration1,
        )

    def get_amount_out(self, amount_in: int, asset0_is_input: bool) -> int:
        """Amount received for supplying exactly `amount_in`."""
        return self.quote(amount_in, True, asset0_is_input)

    def get_amount_in(self, amount_out: int, asset0_is_input: bool) -> int:
        """Amount required to receive exactly `amount_out`."""
        return self.quote(amount_out, False, asset0_is_input)

    def mirrored(self) -> CurvePool:
        """Return the same pool with asset0 and asset1 swapped."""
        return CurvePool(
            reserve0=self.reserve1,
            reserve1=self.reserve0,
            price0=self.price1,
            price1=self.price0,
            concentration0=self.concentration1,
            concentration1=self.concentration0,
        )
