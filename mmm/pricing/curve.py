"""Bonding-curve validation and batch pricing.

Linear curves move the spot price by a fixed `curve_delta` lamports per
unit. Exponential curves move it by `curve_delta` basis points per unit,
iterating one step at a time in a u128 intermediate and truncating on every
step, so the result depends on the number of steps and is not a closed-form
geometric sum.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from mmm.checked_math import checked_add, checked_div, checked_mul, checked_sub, narrow
from mmm.constants import BPS_DENOM, MAX_EXP_CURVE_DELTA_BP
from mmm.errors import InvalidCurveDelta, InvalidCurveType
from mmm.models.pool import CurveKind

if TYPE_CHECKING:
    from mmm.models.pool import Pool


class TradeDirection(Enum):
    """Which way a batch walks the curve.

    BUY_FROM_POOL walks the price down one step per unit,
    SELL_TO_POOL walks it up.
    """

    BUY_FROM_POOL = "buy_from_pool"
    SELL_TO_POOL = "sell_to_pool"


def validate_curve(curve_type: int, curve_delta: int) -> None:
    """Reject curve configurations that must never be stored on a pool."""
    if curve_type not in (CurveKind.LINEAR, CurveKind.EXPONENTIAL):
        logger.debug(f"[CURVE] Rejected curve_type={curve_type}")
        raise InvalidCurveType(f"unsupported curve_type: {curve_type}")

    # exponential delta is a bp rate, at most +100% per step
    if curve_type == CurveKind.EXPONENTIAL and curve_delta > MAX_EXP_CURVE_DELTA_BP:
        logger.debug(f"[CURVE] Rejected exponential curve_delta={curve_delta}")
        raise InvalidCurveDelta(
            f"exponential curve_delta must be <= {MAX_EXP_CURVE_DELTA_BP}: {curve_delta}"
        )


def get_total_price_and_next_price(
    pool: Pool, n: int, direction: TradeDirection
) -> tuple[int, int]:
    """Price a batch of `n` units starting at `pool.spot_price`.

    Returns (total_price, next_spot_price). `next_spot_price` is the curve
    position after all `n` steps, i.e. the price of the following unit.

    Raises:
        NumericOverflow: any step leaves the u64 (or u128 intermediate) range,
            including n == 0.
        InvalidCurveType: pool carries an unsupported curve_type.
    """
    p = pool.spot_price
    delta = pool.curve_delta
    n = narrow(n)
    steps_before_last = checked_sub(n, 1)

    if pool.curve_type == CurveKind.LINEAR:
        return _linear(p, delta, n, steps_before_last, direction)
    if pool.curve_type == CurveKind.EXPONENTIAL:
        return _exponential(p, delta, n, direction)
    raise InvalidCurveType(f"unsupported curve_type: {pool.curve_type}")


def _linear(
    p: int, delta: int, n: int, steps_before_last: int, direction: TradeDirection
) -> tuple[int, int]:
    # n * (2p -/+ (n-1) * delta) / 2
    two_p = checked_mul(p, 2)
    spread = checked_mul(steps_before_last, delta)
    moved = checked_mul(n, delta)

    if direction is TradeDirection.BUY_FROM_POOL:
        total_price = checked_div(checked_mul(n, checked_sub(two_p, spread)), 2)
        next_price = checked_sub(p, moved)
    else:
        total_price = checked_div(checked_mul(n, checked_add(two_p, spread)), 2)
        next_price = checked_add(p, moved)
    return total_price, next_price


def _exponential(
    p: int, delta: int, n: int, direction: TradeDirection
) -> tuple[int, int]:
    growth = checked_add(delta, BPS_DENOM, bits=128)
    if direction is TradeDirection.BUY_FROM_POOL:
        numerator, denominator = BPS_DENOM, growth
    else:
        numerator, denominator = growth, BPS_DENOM

    total_price = 0
    curr_price = p
    for step in range(n):
        total_price = checked_add(total_price, narrow(curr_price))
        prev_price = curr_price
        curr_price = checked_div(
            checked_mul(curr_price, numerator, bits=128), denominator, bits=128
        )
        if curr_price == 0:
            # every remaining step adds 0 and stays at 0
            break
        if curr_price == prev_price:
            # truncation pinned the price; the remaining steps all cost the same
            remaining = n - step - 1
            total_price = checked_add(total_price, checked_mul(narrow(curr_price), remaining))
            break
    return total_price, narrow(curr_price)
