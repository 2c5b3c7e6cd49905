"""Shared test fixtures."""

import struct
from collections.abc import Callable
from dataclasses import dataclass

import pytest
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.metaplex.constants import KEY_MASTER_EDITION_V2, KEY_METADATA_V1
from mmm.models.account import AccountInfo
from mmm.models.pool import CurveKind, Pool
from mmm.pda import (
    find_master_edition_address,
    find_metadata_address,
    token_metadata_program_id,
)


def _borsh_string(value: str, pad_to: int = 0) -> bytes:
    raw = value.encode("utf-8").ljust(pad_to, b"\x00")
    return struct.pack("<I", len(raw)) + raw


def _build_metadata(
    mint: Pubkey,
    *,
    update_authority: Pubkey | None = None,
    name: str = "Test NFT #1",
    symbol: str = "TNFT",
    uri: str = "https://arweave.net/abc123",
    seller_fee_basis_points: int = 500,
    creators: list[tuple[Pubkey, bool, int]] | None = None,
    primary_sale_happened: bool = False,
    is_mutable: bool = True,
    edition_nonce: int | None = 254,
    token_standard: int | None = 0,
    collection: tuple[bool, Pubkey] | None = None,
    legacy: bool = False,
) -> bytes:
    """Build a Token Metadata `Metadata` account (Borsh, fixed-width padded strings).

    legacy=True stops after is_mutable, like accounts written before the
    optional trailing fields existed.
    """
    buf = bytearray([KEY_METADATA_V1])
    buf += bytes(update_authority or Pubkey.new_unique())
    buf += bytes(mint)
    buf += _borsh_string(name, 32)
    buf += _borsh_string(symbol, 10)
    buf += _borsh_string(uri, 200)
    buf += struct.pack("<H", seller_fee_basis_points)

    if creators is None:
        buf.append(0)
    else:
        buf.append(1)
        buf += struct.pack("<I", len(creators))
        for address, verified, share in creators:
            buf += bytes(address) + bytes([int(verified), share])

    buf += bytes([int(primary_sale_happened), int(is_mutable)])
    if legacy:
        return bytes(buf)

    buf += b"\x00" if edition_nonce is None else bytes([1, edition_nonce])
    buf += b"\x00" if token_standard is None else bytes([1, token_standard])
    if collection is None:
        buf.append(0)
    else:
        verified, key = collection
        buf += bytes([1, int(verified)]) + bytes(key)
    buf += b"\x00" * 16  # uses / collection_details / padding
    return bytes(buf)


@dataclass
class Nft:
    """A mint with its metadata and master edition accounts."""

    mint: Pubkey
    metadata: AccountInfo
    master_edition: AccountInfo


@pytest.fixture
def build_metadata() -> Callable[..., bytes]:
    return _build_metadata


@pytest.fixture
def creator() -> Pubkey:
    return Pubkey.new_unique()


@pytest.fixture
def collection_key() -> Pubkey:
    return Pubkey.new_unique()


@pytest.fixture
def make_nft(creator: Pubkey, collection_key: Pubkey) -> Callable[..., Nft]:
    """Factory for a well-formed NFT; keyword args override metadata fields.

    By default the first creator is `creator` (verified) and the collection
    is `collection_key` (verified).
    """

    def _make(**metadata_overrides) -> Nft:
        mint = Pubkey.new_unique()
        program_id = token_metadata_program_id()
        fields = {
            "creators": [(creator, True, 100)],
            "collection": (True, collection_key),
        }
        fields.update(metadata_overrides)
        metadata = AccountInfo(
            key=find_metadata_address(mint)[0],
            owner=program_id,
            lamports=5_616_720,
            data=_build_metadata(mint, **fields),
        )
        master_edition = AccountInfo(
            key=find_master_edition_address(mint)[0],
            owner=program_id,
            lamports=2_853_600,
            data=bytes([KEY_MASTER_EDITION_V2]) + b"\x00" * 281,
        )
        return Nft(mint=mint, metadata=metadata, master_edition=master_edition)

    return _make


@pytest.fixture
def owner() -> Pubkey:
    return Pubkey.new_unique()


@pytest.fixture
def make_pool(owner: Pubkey) -> Callable[..., Pool]:
    """Factory for a linear pool (spot 1 SOL, delta 0.1 SOL) with overrides."""

    def _make(**overrides) -> Pool:
        fields = {
            "spot_price": 1_000_000_000,
            "curve_type": CurveKind.LINEAR,
            "curve_delta": 100_000_000,
            "lp_fee_bp": 0,
            "referral_bp": 0,
            "sellside_orders_count": 0,
            "owner": owner,
            "uuid": Pubkey.new_unique(),
        }
        fields.update(overrides)
        return Pool(**fields)

    return _make
