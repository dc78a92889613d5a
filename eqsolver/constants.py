"""Fixed-point and bit-width constants for the equilibrium curve.

Values mirror the on-chain contract exactly.
"""

# Fixed-point unit (1e18) for prices, concentrations and curve terms
PRECISION = 10**18

# Default width of EVM integers
UINT256_BITS = 256
UINT256_MAX = 2**256 - 1

# Signed int256 range (two's complement)
INT256_MAX = 2**255 - 1
INT256_MIN = -(2**255)

# Pool reserves are stored as uint112
RESERVE_BITS = 112

# Headroom the contract reserves for the intermediate `v` in the forward curve
CURVE_V_BITS = 248
