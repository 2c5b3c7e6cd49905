"""Print the price schedule of a bonding curve.

For each batch size 1..N shows the total price of the batch, the spot price
the pool moves to, and the LP/referral fees on that total.

Usage:
    poetry run python scripts/curve_table.py --curve linear --spot 1000000000 --delta 100000000 -n 5
    poetry run python scripts/curve_table.py --curve exp --spot 1000000000 --delta 500 -n 10 --sell
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger  # noqa: E402
from solders.pubkey import Pubkey  # noqa: E402

from mmm.errors import MMMError  # noqa: E402
from mmm.models import CurveKind, Pool  # noqa: E402
from mmm.pricing.curve import TradeDirection, validate_curve  # noqa: E402
from mmm.pricing.quote import quote_fulfill  # noqa: E402
from mmm.utils.logger import setup_logger  # noqa: E402

_CURVES = {"linear": CurveKind.LINEAR, "exp": CurveKind.EXPONENTIAL}


def print_table(pool: Pool, max_n: int, direction: TradeDirection) -> None:
    print(
        f"\n{direction.value}  curve={CurveKind(pool.curve_type).name} "
        f"spot={pool.spot_price} delta={pool.curve_delta}"
    )
    print(f"  {'n':>4} {'total':>22} {'next_spot':>22} {'lp_fee':>18} {'referral':>18}")
    # treat the pool as two-sided so the LP fee column is populated
    escrow = pool.spot_price
    for n in range(1, max_n + 1):
        try:
            quote = quote_fulfill(pool, n, direction, escrow)
        except MMMError as e:
            print(f"  {n:>4} {type(e).__name__}: {e}")
            break
        print(
            f"  {n:>4} {quote.total_price:>22} {quote.next_spot_price:>22} "
            f"{quote.lp_fee:>18} {quote.referral_fee:>18}"
        )
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a bonding curve price schedule")
    parser.add_argument("--curve", choices=sorted(_CURVES), default="linear")
    parser.add_argument("--spot", type=int, required=True, help="Spot price in lamports")
    parser.add_argument("--delta", type=int, required=True, help="Lamports (linear) or bp (exp)")
    parser.add_argument("-n", type=int, default=5, help="Largest batch size")
    parser.add_argument("--lp-fee-bp", type=int, default=0)
    parser.add_argument("--referral-bp", type=int, default=0)
    parser.add_argument("--sell", action="store_true", help="Price sells to the pool")
    args = parser.parse_args()

    setup_logger()

    curve_type = _CURVES[args.curve]
    try:
        validate_curve(curve_type, args.delta)
        pool = Pool(
            spot_price=args.spot,
            curve_type=curve_type,
            curve_delta=args.delta,
            lp_fee_bp=args.lp_fee_bp,
            referral_bp=args.referral_bp,
            sellside_orders_count=args.n,
            owner=Pubkey.default(),
            uuid=Pubkey.default(),
        )
    except MMMError as e:
        logger.error(f"[CURVE] {type(e).__name__}: {e}")
        sys.exit(1)

    direction = TradeDirection.SELL_TO_POOL if args.sell else TradeDirection.BUY_FROM_POOL
    print_table(pool, args.n, direction)


if __name__ == "__main__":
    main()
