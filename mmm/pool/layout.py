"""Fixed-size Anchor account layout for `Pool`.

Layout (little-endian, packed):
  [0:8]    Anchor discriminator = sha256("account:Pool")[:8]
  u64      spot_price
  u8       curve_type
  u64      curve_delta
  bool     reinvest
  i64      expiry
  u16      lp_fee_bp
  Pubkey   referral
  u16      referral_bp
  u64      sellside_orders_count
  Pubkey   owner
  Pubkey   cosigner
  Pubkey   uuid
  6 x (u8 kind + Pubkey value)  allowlists, unused slots EMPTY
"""

import hashlib
import struct

from pydantic import ValidationError
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.constants import ALLOWLIST_MAX_LEN
from mmm.errors import (
    AccountDidNotDeserialize,
    AccountDiscriminatorMismatch,
    InvalidLPFeeBP,
    InvalidReferralBP,
)
from mmm.models.allowlist import Allowlist
from mmm.models.pool import Pool

POOL_DISCRIMINATOR = hashlib.sha256(b"account:Pool").digest()[:8]

_FIELDS = struct.Struct("<QBQ?qH32sHQ32s32s32s")
_ALLOWLIST = struct.Struct("<B32s")

POOL_LEN = len(POOL_DISCRIMINATOR) + _FIELDS.size + ALLOWLIST_MAX_LEN * _ALLOWLIST.size


def encode_pool(pool: Pool) -> bytes:
    """Serialize a pool into its POOL_LEN-byte account representation."""
    buf = bytearray(POOL_LEN)
    buf[0:8] = POOL_DISCRIMINATOR
    _FIELDS.pack_into(
        buf,
        8,
        pool.spot_price,
        pool.curve_type,
        pool.curve_delta,
        pool.reinvest,
        pool.expiry,
        pool.lp_fee_bp,
        bytes(pool.referral),
        pool.referral_bp,
        pool.sellside_orders_count,
        bytes(pool.owner),
        bytes(pool.cosigner),
        bytes(pool.uuid),
    )
    slots = list(pool.allowlists)
    slots += [Allowlist.empty()] * (ALLOWLIST_MAX_LEN - len(slots))
    offset = 8 + _FIELDS.size
    for allowlist in slots:
        _ALLOWLIST.pack_into(buf, offset, allowlist.kind, bytes(allowlist.value))
        offset += _ALLOWLIST.size
    return bytes(buf)


def decode_pool(data: bytes) -> Pool:
    """Deserialize pool account data. All six allowlist slots are returned.

    Raises:
        AccountDiscriminatorMismatch: data does not start with the Pool
            discriminator (including zeroed/closed accounts).
        AccountDidNotDeserialize: wrong length or out-of-range fields.
    """
    if len(data) < 8 or bytes(data[0:8]) != POOL_DISCRIMINATOR:
        raise AccountDiscriminatorMismatch("account is not an initialized Pool")
    if len(data) != POOL_LEN:
        raise AccountDidNotDeserialize(f"pool data is {len(data)} bytes, expected {POOL_LEN}")

    (
        spot_price,
        curve_type,
        curve_delta,
        reinvest,
        expiry,
        lp_fee_bp,
        referral,
        referral_bp,
        sellside_orders_count,
        owner,
        cosigner,
        uuid,
    ) = _FIELDS.unpack_from(data, 8)

    allowlists = [
        Allowlist(kind=kind, value=Pubkey.from_bytes(value))
        for kind, value in _ALLOWLIST.iter_unpack(bytes(data[8 + _FIELDS.size :]))
    ]

    try:
        return Pool(
            spot_price=spot_price,
            curve_type=curve_type,
            curve_delta=curve_delta,
            reinvest=reinvest,
            expiry=expiry,
            lp_fee_bp=lp_fee_bp,
            referral=Pubkey.from_bytes(referral),
            referral_bp=referral_bp,
            sellside_orders_count=sellside_orders_count,
            owner=Pubkey.from_bytes(owner),
            cosigner=Pubkey.from_bytes(cosigner),
            uuid=Pubkey.from_bytes(uuid),
            allowlists=allowlists,
        )
    except (ValidationError, InvalidLPFeeBP, InvalidReferralBP) as e:
        raise AccountDidNotDeserialize(str(e)) from e
