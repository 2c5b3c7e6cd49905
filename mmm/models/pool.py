"""Pool state a bonding curve operates on."""

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.constants import ALLOWLIST_MAX_LEN, BPS_DENOM
from mmm.errors import InvalidLPFeeBP, InvalidReferralBP
from mmm.models.allowlist import Allowlist
from mmm.models.types import I64, U8, U16, U64


class CurveKind(IntEnum):
    """Supported bonding curves (u8 on-chain)."""

    LINEAR = 0
    EXPONENTIAL = 1


def check_lp_fee_bp(lp_fee_bp: int) -> None:
    if lp_fee_bp > BPS_DENOM:
        raise InvalidLPFeeBP(f"lp_fee_bp must be <= {BPS_DENOM}: {lp_fee_bp}")


def check_referral_bp(referral_bp: int) -> None:
    if referral_bp > BPS_DENOM:
        raise InvalidReferralBP(f"referral_bp must be <= {BPS_DENOM}: {referral_bp}")


class Pool(BaseModel):
    """Persistent pool record.

    Field widths and the fee bp bounds are checked on construction and on
    every assignment; an out-of-range fee raises `InvalidLPFeeBP` or
    `InvalidReferralBP` directly. Curve shape and allowlist kinds are checked
    by the admin/settlement paths before they write here; `curve_type` is
    kept as the raw u8 so an unknown value can still be represented and
    rejected explicitly.
    """

    spot_price: U64
    curve_type: U8
    curve_delta: U64
    reinvest: bool = False
    expiry: I64 = 0
    lp_fee_bp: U16 = 0
    referral: Pubkey = Field(default_factory=Pubkey.default)
    referral_bp: U16 = 0
    sellside_orders_count: U64 = 0
    owner: Pubkey
    cosigner: Pubkey = Field(default_factory=Pubkey.default)
    uuid: Pubkey
    allowlists: list[Allowlist] = Field(
        default_factory=list, max_length=ALLOWLIST_MAX_LEN
    )

    model_config = {"arbitrary_types_allowed": True, "validate_assignment": True}

    @field_validator("lp_fee_bp")
    @classmethod
    def _lp_fee_within_bps(cls, v: int) -> int:
        check_lp_fee_bp(v)
        return v

    @field_validator("referral_bp")
    @classmethod
    def _referral_within_bps(cls, v: int) -> int:
        check_referral_bp(v)
        return v
