"""Pydantic v2 models for decoded Token Metadata accounts."""

from pydantic import BaseModel
from solders.pubkey import Pubkey  # type: ignore[import-untyped]


class Creator(BaseModel):
    address: Pubkey
    verified: bool
    share: int

    model_config = {"arbitrary_types_allowed": True}


class Collection(BaseModel):
    verified: bool
    key: Pubkey

    model_config = {"arbitrary_types_allowed": True}


class NftMetadata(BaseModel):
    """Decoded Metadata account (fields up to and including collection)."""

    key: int
    update_authority: Pubkey
    mint: Pubkey
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: list[Creator] | None = None
    primary_sale_happened: bool = False
    is_mutable: bool = True
    edition_nonce: int | None = None
    token_standard: int | None = None
    collection: Collection | None = None

    model_config = {"arbitrary_types_allowed": True}

    @property
    def first_creator(self) -> Creator | None:
        if not self.creators:
            return None
        return self.creators[0]
