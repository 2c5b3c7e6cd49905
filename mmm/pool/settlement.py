"""Apply a priced fill to pool state.

Order of checks for a fill: allowlist eligibility, then the sell-side order
count for buys, then pricing and fees, then the state update. Nothing on the
pool changes unless every step passes.
"""

from __future__ import annotations

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.checked_math import checked_add, checked_sub, narrow
from mmm.eligibility import validate_mint_against_allowlists
from mmm.models.account import AccountInfo
from mmm.models.pool import Pool
from mmm.pool.admin import check_fee_bps
from mmm.pricing.curve import TradeDirection, validate_curve
from mmm.pricing.quote import FulfillQuote, quote_fulfill


def apply_fill(pool: Pool, direction: TradeDirection, n: int, next_spot_price: int) -> Pool:
    """Move the pool to `next_spot_price` and adjust its sell-side order count.

    Buying from the pool consumes `n` sell-side orders. Selling to the pool
    only adds sell-side orders when the pool reinvests the acquired assets.
    """
    validate_curve(pool.curve_type, pool.curve_delta)
    check_fee_bps(pool.lp_fee_bp, pool.referral_bp)

    spot_price = narrow(next_spot_price)
    if direction is TradeDirection.BUY_FROM_POOL:
        orders = checked_sub(pool.sellside_orders_count, n)
    elif pool.reinvest:
        orders = checked_add(pool.sellside_orders_count, n)
    else:
        orders = pool.sellside_orders_count

    pool.spot_price = spot_price
    pool.sellside_orders_count = orders
    return pool


def fulfill(
    pool: Pool,
    *,
    n: int,
    direction: TradeDirection,
    buyside_escrow_balance: int,
    mint: Pubkey,
    metadata: AccountInfo,
    master_edition: AccountInfo,
) -> FulfillQuote:
    """Validate, price and settle one fill against `pool`."""
    validate_mint_against_allowlists(pool.allowlists, mint, metadata, master_edition)
    if direction is TradeDirection.BUY_FROM_POOL:
        # a buy can never take more than the pool has listed
        checked_sub(pool.sellside_orders_count, n)
    quote = quote_fulfill(pool, n, direction, buyside_escrow_balance)
    apply_fill(pool, direction, n, quote.next_spot_price)
    logger.debug(
        f"[POOL] Fill {direction.value} n={n} uuid={pool.uuid}: "
        f"total={quote.total_price} next_spot={quote.next_spot_price} "
        f"lp_fee={quote.lp_fee} referral_fee={quote.referral_fee}"
    )
    return quote
