"""HTTP API for off-chain equilibrium curve quotes."""
