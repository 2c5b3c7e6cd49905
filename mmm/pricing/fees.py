"""LP and referral fees charged on top of a curve price."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from mmm.checked_math import checked_div, checked_mul, narrow
from mmm.constants import BPS_DENOM

if TYPE_CHECKING:
    from mmm.models.pool import Pool


def _apply_bp(amount: int, bp: int) -> int:
    """floor(amount * bp / 10000) via a u128 intermediate, narrowed to u64."""
    product = checked_mul(narrow(amount), bp, bits=128)
    return narrow(checked_div(product, BPS_DENOM, bits=128))


def get_lp_fee(pool: Pool, buyside_escrow_balance: int, total_price: int) -> int:
    """LP fee owed to the pool maker for a fill of `total_price`.

    Waived (0) when the pool has no sell-side orders, or when the buy-side
    escrow cannot cover one unit at spot price, i.e. the pool is not
    providing two-sided liquidity.
    """
    if pool.sellside_orders_count < 1:
        logger.debug("[FEES] LP fee waived: no sell-side orders")
        return 0

    if buyside_escrow_balance < pool.spot_price:
        logger.debug(
            f"[FEES] LP fee waived: escrow {buyside_escrow_balance} < spot {pool.spot_price}"
        )
        return 0

    return _apply_bp(total_price, pool.lp_fee_bp)


def get_referral_fee(pool: Pool, total_price: int) -> int:
    return _apply_bp(total_price, pool.referral_bp)
