"""Allowlist entries stored on a pool."""

from enum import IntEnum

from pydantic import BaseModel
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.models.types import U8


class AllowlistKind(IntEnum):
    """Known allowlist entry kinds (u8 on-chain)."""

    EMPTY = 0
    FVCA = 1  # first verified creator address
    MINT = 2
    MCC = 3  # verified Metaplex certified collection


_VALID_KINDS = frozenset(int(k) for k in AllowlistKind)


class Allowlist(BaseModel):
    """One (kind, value) eligibility rule. `value` meaning depends on kind."""

    kind: U8
    value: Pubkey

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @classmethod
    def empty(cls) -> "Allowlist":
        return cls(kind=AllowlistKind.EMPTY, value=Pubkey.default())

    def valid(self) -> bool:
        return self.kind in _VALID_KINDS

    def is_empty(self) -> bool:
        return self.kind == AllowlistKind.EMPTY
