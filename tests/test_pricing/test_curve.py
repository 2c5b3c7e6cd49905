"""Tests for curve validation and batch pricing.

All tests are synchronous (pure logic).
"""

import pytest

from mmm.constants import U64_MAX
from mmm.errors import InvalidCurveDelta, InvalidCurveType, NumericOverflow
from mmm.models.pool import CurveKind
from mmm.pricing.curve import (
    TradeDirection,
    get_total_price_and_next_price,
    validate_curve,
)

BUY = TradeDirection.BUY_FROM_POOL
SELL = TradeDirection.SELL_TO_POOL


# ═══════════════════════════════════════════════════════════════════════
# validate_curve
# ═══════════════════════════════════════════════════════════════════════


class TestValidateCurve:
    def test_linear_any_delta(self) -> None:
        validate_curve(CurveKind.LINEAR, 0)
        validate_curve(CurveKind.LINEAR, U64_MAX)

    def test_exponential_at_limit(self) -> None:
        validate_curve(CurveKind.EXPONENTIAL, 10_000)

    def test_exponential_over_limit(self) -> None:
        with pytest.raises(InvalidCurveDelta):
            validate_curve(CurveKind.EXPONENTIAL, 10_001)

    def test_unknown_curve_type(self) -> None:
        with pytest.raises(InvalidCurveType):
            validate_curve(2, 0)

    def test_unknown_curve_type_checked_before_delta(self) -> None:
        with pytest.raises(InvalidCurveType):
            validate_curve(255, 10_001)


# ═══════════════════════════════════════════════════════════════════════
# Linear
# ═══════════════════════════════════════════════════════════════════════


class TestLinearCurve:
    def test_buy_batch(self, make_pool) -> None:
        pool = make_pool(spot_price=1000, curve_delta=100)
        assert get_total_price_and_next_price(pool, 3, BUY) == (2700, 700)

    def test_sell_batch(self, make_pool) -> None:
        pool = make_pool(spot_price=1000, curve_delta=100)
        assert get_total_price_and_next_price(pool, 3, SELL) == (3300, 1300)

    def test_single_unit_costs_spot(self, make_pool) -> None:
        pool = make_pool(spot_price=1000, curve_delta=100)
        assert get_total_price_and_next_price(pool, 1, BUY) == (1000, 900)
        assert get_total_price_and_next_price(pool, 1, SELL) == (1000, 1100)

    def test_zero_delta_is_flat(self, make_pool) -> None:
        pool = make_pool(spot_price=500, curve_delta=0)
        assert get_total_price_and_next_price(pool, 4, BUY) == (2000, 500)
        assert get_total_price_and_next_price(pool, 4, SELL) == (2000, 500)

    @pytest.mark.parametrize(
        "p, delta, n",
        [(1000, 100, 3), (1_000_000_000, 10_000_000, 25), (5, 1, 5), (7, 0, 9)],
    )
    def test_total_matches_step_sum(self, make_pool, p: int, delta: int, n: int) -> None:
        pool = make_pool(spot_price=p, curve_delta=delta)
        total, _ = get_total_price_and_next_price(pool, n, BUY)
        assert total == sum(p - i * delta for i in range(n))
        total, _ = get_total_price_and_next_price(pool, n, SELL)
        assert total == sum(p + i * delta for i in range(n))

    @pytest.mark.parametrize(
        "p, delta, n",
        [(1000, 100, 3), (1_000_000_000, 10_000_000, 25), (42, 0, 7)],
    )
    def test_sell_then_buy_returns_to_spot(self, make_pool, p: int, delta: int, n: int) -> None:
        """Linear curves are exactly invertible."""
        pool = make_pool(spot_price=p, curve_delta=delta)
        _, raised = get_total_price_and_next_price(pool, n, SELL)
        back = make_pool(spot_price=raised, curve_delta=delta)
        _, restored = get_total_price_and_next_price(back, n, BUY)
        assert restored == p

    def test_buy_to_exactly_zero(self, make_pool) -> None:
        pool = make_pool(spot_price=100, curve_delta=50)
        assert get_total_price_and_next_price(pool, 2, BUY) == (150, 0)

    def test_buy_below_zero_fails(self, make_pool) -> None:
        """next spot 100 - 3*50 underflows: error, not saturation at 0."""
        pool = make_pool(spot_price=100, curve_delta=50)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 3, BUY)

    def test_buy_total_underflow_fails(self, make_pool) -> None:
        pool = make_pool(spot_price=100, curve_delta=50)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 6, BUY)

    def test_sell_overflow_near_max_spot(self, make_pool) -> None:
        pool = make_pool(spot_price=U64_MAX, curve_delta=1)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 1, SELL)

    def test_huge_delta_overflow(self, make_pool) -> None:
        pool = make_pool(spot_price=1, curve_delta=U64_MAX)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 3, SELL)


# ═══════════════════════════════════════════════════════════════════════
# Exponential
# ═══════════════════════════════════════════════════════════════════════


class TestExponentialCurve:
    def test_sell_two_steps(self, make_pool) -> None:
        """1000 then 1100 (+10%); the pool ends at the third step, 1210."""
        pool = make_pool(spot_price=1000, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        assert get_total_price_and_next_price(pool, 2, SELL) == (2100, 1210)

    def test_sell_three_steps(self, make_pool) -> None:
        pool = make_pool(spot_price=1000, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        assert get_total_price_and_next_price(pool, 3, SELL) == (3310, 1331)

    def test_buy_truncates_every_step(self, make_pool) -> None:
        """1000, 909 (909.09), 826 (826.36); next 750 (750.9)."""
        pool = make_pool(spot_price=1000, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        assert get_total_price_and_next_price(pool, 3, BUY) == (2735, 750)

    def test_doubling_curve(self, make_pool) -> None:
        pool = make_pool(spot_price=1, curve_type=CurveKind.EXPONENTIAL, curve_delta=10_000)
        assert get_total_price_and_next_price(pool, 4, SELL) == (15, 16)

    def test_zero_delta_is_flat(self, make_pool) -> None:
        pool = make_pool(spot_price=700, curve_type=CurveKind.EXPONENTIAL, curve_delta=0)
        assert get_total_price_and_next_price(pool, 3, SELL) == (2100, 700)
        assert get_total_price_and_next_price(pool, 3, BUY) == (2100, 700)

    def test_huge_batch_on_flat_curve(self, make_pool) -> None:
        pool = make_pool(spot_price=700, curve_type=CurveKind.EXPONENTIAL, curve_delta=0)
        assert get_total_price_and_next_price(pool, 10**12, BUY) == (700 * 10**12, 700)

    def test_huge_batch_when_truncation_pins_price(self, make_pool) -> None:
        """1 * 1.0001 truncates back to 1, so every step costs 1."""
        pool = make_pool(spot_price=1, curve_type=CurveKind.EXPONENTIAL, curve_delta=1)
        assert get_total_price_and_next_price(pool, 10**12, SELL) == (10**12, 1)

    def test_pinned_price_matches_step_sum(self, make_pool) -> None:
        """Shortcut for a pinned price agrees with walking each step."""
        pool = make_pool(spot_price=5, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        # 5, 5 (5.5) pins immediately
        assert get_total_price_and_next_price(pool, 6, SELL) == (30, 5)
        pool = make_pool(spot_price=10, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        # 10, 11, 12, 13, 14, 15 then 16
        assert get_total_price_and_next_price(pool, 6, SELL) == (75, 16)

    def test_pinned_price_total_overflow_fails(self, make_pool) -> None:
        pool = make_pool(spot_price=U64_MAX // 2, curve_type=CurveKind.EXPONENTIAL, curve_delta=0)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 10**12, SELL)

    def test_buy_decays_to_zero(self, make_pool) -> None:
        pool = make_pool(spot_price=3, curve_type=CurveKind.EXPONENTIAL, curve_delta=10_000)
        assert get_total_price_and_next_price(pool, 5, BUY) == (4, 0)

    def test_buy_then_sell_does_not_round_trip(self, make_pool) -> None:
        """Per-step truncation loses value in both directions."""
        pool = make_pool(spot_price=1000, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        _, lowered = get_total_price_and_next_price(pool, 3, BUY)
        back = make_pool(spot_price=lowered, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        _, restored = get_total_price_and_next_price(back, 3, SELL)
        assert restored == 997
        assert restored != pool.spot_price

    def test_single_step_round_trip_loses_one(self, make_pool) -> None:
        pool = make_pool(spot_price=1000, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        assert get_total_price_and_next_price(pool, 1, BUY) == (1000, 909)
        back = make_pool(spot_price=909, curve_type=CurveKind.EXPONENTIAL, curve_delta=1000)
        assert get_total_price_and_next_price(back, 1, SELL) == (909, 999)

    def test_next_price_overflow_fails(self, make_pool) -> None:
        """Spot doubles past u64: must fail, not wrap."""
        pool = make_pool(spot_price=U64_MAX, curve_type=CurveKind.EXPONENTIAL, curve_delta=10_000)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 1, SELL)

    def test_total_overflow_fails(self, make_pool) -> None:
        pool = make_pool(spot_price=U64_MAX, curve_type=CurveKind.EXPONENTIAL, curve_delta=0)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 2, SELL)


class TestPricingGuards:
    @pytest.mark.parametrize("curve_type", [CurveKind.LINEAR, CurveKind.EXPONENTIAL])
    def test_zero_batch_fails(self, make_pool, curve_type: int) -> None:
        pool = make_pool(curve_type=curve_type, curve_delta=100)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, 0, BUY)

    def test_batch_wider_than_u64_fails(self, make_pool) -> None:
        pool = make_pool(spot_price=0, curve_delta=0)
        with pytest.raises(NumericOverflow):
            get_total_price_and_next_price(pool, U64_MAX + 1, SELL)

    def test_unknown_curve_type_on_pool(self, make_pool) -> None:
        pool = make_pool(curve_type=2)
        with pytest.raises(InvalidCurveType):
            get_total_price_and_next_price(pool, 1, BUY)
