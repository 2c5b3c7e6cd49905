"""Decode Metaplex Token Metadata `Metadata` account data (Borsh layout).

Only the fields up to `collection` are decoded. Older accounts may end
before the optional trailing fields (edition_nonce, token_standard,
collection); those decode as None.
"""

import struct

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.errors import AccountDidNotDeserialize
from mmm.metaplex.constants import CREATOR_SIZE, KEY_METADATA_V1, METADATA_HEADER_SIZE
from mmm.metaplex.models import Collection, Creator, NftMetadata


class _Reader:
    """Sequential little-endian reader over account bytes."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = data
        self.offset = offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self.offset

    def take(self, size: int) -> bytes:
        if size > self.remaining:
            raise AccountDidNotDeserialize(
                f"metadata truncated: need {size} bytes at {self.offset}, have {self.remaining}"
            )
        chunk = self._data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u16(self) -> int:
        return struct.unpack("<H", self.take(2))[0]

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]

    def flag(self) -> bool:
        value = self.u8()
        if value > 1:
            raise AccountDidNotDeserialize(f"invalid bool byte {value} at {self.offset - 1}")
        return value == 1

    def pubkey(self) -> Pubkey:
        return Pubkey.from_bytes(self.take(32))

    def string(self) -> str:
        raw = self.take(self.u32())
        try:
            # fixed-width padded on-chain
            return raw.decode("utf-8").rstrip("\x00")
        except UnicodeDecodeError as e:
            raise AccountDidNotDeserialize(f"invalid utf-8 string: {e}") from e


def decode_metadata(data: bytes) -> NftMetadata:
    """Decode raw Metadata account bytes.

    Raises:
        AccountDidNotDeserialize: wrong account key or truncated/invalid data.
    """
    if len(data) < METADATA_HEADER_SIZE:
        raise AccountDidNotDeserialize(f"metadata too short: {len(data)} bytes")
    if data[0] != KEY_METADATA_V1:
        logger.debug(f"[METAPLEX] Unexpected account key {data[0]}")
        raise AccountDidNotDeserialize(f"not a MetadataV1 account (key={data[0]})")

    r = _Reader(bytes(data), offset=1)
    update_authority = r.pubkey()
    mint = r.pubkey()
    name = r.string()
    symbol = r.string()
    uri = r.string()
    seller_fee_basis_points = r.u16()

    creators: list[Creator] | None = None
    if r.flag():
        count = r.u32()
        if count * CREATOR_SIZE > r.remaining:
            raise AccountDidNotDeserialize(f"creator count {count} exceeds account data")
        creators = [
            Creator(address=r.pubkey(), verified=r.flag(), share=r.u8())
            for _ in range(count)
        ]

    primary_sale_happened = r.flag()
    is_mutable = r.flag()

    edition_nonce = _optional(r, r.u8)
    token_standard = _optional(r, r.u8)
    collection = _optional(r, lambda: Collection(verified=r.flag(), key=r.pubkey()))

    return NftMetadata(
        key=KEY_METADATA_V1,
        update_authority=update_authority,
        mint=mint,
        name=name,
        symbol=symbol,
        uri=uri,
        seller_fee_basis_points=seller_fee_basis_points,
        creators=creators,
        primary_sale_happened=primary_sale_happened,
        is_mutable=is_mutable,
        edition_nonce=edition_nonce,
        token_standard=token_standard,
        collection=collection,
    )


def _optional(r: _Reader, read):
    """Borsh Option<T>; end of data counts as None for trailing fields."""
    if r.remaining == 0:
        return None
    if not r.flag():
        return None
    return read()
