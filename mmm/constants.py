"""Protocol-wide constants (integer widths, basis points, PDA seeds)."""

# Integer widths used by on-chain state
U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

# 1 bp = 0.01%
BPS_DENOM = 10_000

# Exponential curves express curve_delta in bp, capped at 100% per step
MAX_EXP_CURVE_DELTA_BP = 10_000

# Fixed number of allowlist slots stored on a pool
ALLOWLIST_MAX_LEN = 6

# PDA seeds
POOL_PREFIX = b"mmm_pool"
BUYSIDE_SOL_ESCROW_ACCOUNT_PREFIX = b"mmm_buyside_sol_escrow_account"
