"""Price + fee quote for a single fill."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mmm.pricing.curve import TradeDirection, get_total_price_and_next_price
from mmm.pricing.fees import get_lp_fee, get_referral_fee

if TYPE_CHECKING:
    from mmm.models.pool import Pool


@dataclass(frozen=True)
class FulfillQuote:
    """Everything a settlement layer needs to move funds for one fill."""

    total_price: int
    next_spot_price: int
    lp_fee: int
    referral_fee: int


def quote_fulfill(
    pool: Pool,
    n: int,
    direction: TradeDirection,
    buyside_escrow_balance: int,
) -> FulfillQuote:
    """Price `n` units and derive the fees from the resulting total."""
    total_price, next_spot_price = get_total_price_and_next_price(pool, n, direction)
    return FulfillQuote(
        total_price=total_price,
        next_spot_price=next_spot_price,
        lp_fee=get_lp_fee(pool, buyside_escrow_balance, total_price),
        referral_fee=get_referral_fee(pool, total_price),
    )
