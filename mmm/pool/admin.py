"""Pool creation and owner updates.

Every check runs before any field is written, so a rejected update leaves
the pool exactly as it was.
"""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.eligibility import validate_allowlists
from mmm.models.allowlist import Allowlist
from mmm.models.pool import Pool, check_lp_fee_bp, check_referral_bp
from mmm.models.types import I64, U8, U16, U64
from mmm.pricing.curve import validate_curve


class CreatePoolArgs(BaseModel):
    spot_price: U64
    curve_type: U8
    curve_delta: U64
    reinvest: bool = False
    expiry: I64 = 0
    lp_fee_bp: U16 = 0
    referral: Pubkey = Field(default_factory=Pubkey.default)
    referral_bp: U16 = 0
    cosigner: Pubkey = Field(default_factory=Pubkey.default)
    uuid: Pubkey
    allowlists: list[Allowlist] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}


class UpdatePoolArgs(BaseModel):
    spot_price: U64
    curve_type: U8
    curve_delta: U64
    reinvest: bool = False
    expiry: I64 = 0
    lp_fee_bp: U16 = 0


def check_fee_bps(lp_fee_bp: int, referral_bp: int) -> None:
    check_lp_fee_bp(lp_fee_bp)
    check_referral_bp(referral_bp)


def create_pool(owner: Pubkey, args: CreatePoolArgs) -> Pool:
    """Build a new, empty pool after validating its configuration."""
    check_fee_bps(args.lp_fee_bp, args.referral_bp)
    validate_curve(args.curve_type, args.curve_delta)
    validate_allowlists(args.allowlists)

    pool = Pool(
        spot_price=args.spot_price,
        curve_type=args.curve_type,
        curve_delta=args.curve_delta,
        reinvest=args.reinvest,
        expiry=args.expiry,
        lp_fee_bp=args.lp_fee_bp,
        referral=args.referral,
        referral_bp=args.referral_bp,
        sellside_orders_count=0,
        owner=owner,
        cosigner=args.cosigner,
        uuid=args.uuid,
        allowlists=list(args.allowlists),
    )
    logger.info(f"[POOL] Created pool owner={owner} uuid={args.uuid}")
    return pool


def update_pool(pool: Pool, args: UpdatePoolArgs) -> Pool:
    """Apply an owner update in place and return the pool."""
    check_lp_fee_bp(args.lp_fee_bp)
    validate_curve(args.curve_type, args.curve_delta)

    pool.spot_price = args.spot_price
    pool.curve_type = args.curve_type
    pool.curve_delta = args.curve_delta
    pool.reinvest = args.reinvest
    pool.expiry = args.expiry
    pool.lp_fee_bp = args.lp_fee_bp
    logger.debug(
        f"[POOL] Updated pool uuid={pool.uuid}: spot={args.spot_price} "
        f"curve={args.curve_type}/{args.curve_delta} lp_fee_bp={args.lp_fee_bp}"
    )
    return pool
