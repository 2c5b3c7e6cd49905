"""Allowlist checks: which NFTs a pool will trade.

A pool's allowlist entries are unioned: an NFT is eligible as soon as any
single entry matches it. Before matching, the metadata and master edition
accounts passed alongside the mint are checked to be the genuine Token
Metadata accounts for that mint.
"""

from collections.abc import Sequence

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.constants import ALLOWLIST_MAX_LEN
from mmm.errors import (
    AccountOwnedByWrongProgram,
    ConstraintSeeds,
    InvalidAllowLists,
    InvalidMasterEdition,
)
from mmm.metaplex.constants import VALID_MASTER_EDITION_KEYS
from mmm.metaplex.decoder import decode_metadata
from mmm.metaplex.models import NftMetadata
from mmm.models.account import AccountInfo
from mmm.models.allowlist import Allowlist, AllowlistKind
from mmm.pda import (
    find_master_edition_address,
    find_metadata_address,
    token_metadata_program_id,
)


def validate_allowlists(allowlists: Sequence[Allowlist]) -> None:
    """Structural check run whenever allowlists are written to a pool."""
    if len(allowlists) > ALLOWLIST_MAX_LEN:
        raise InvalidAllowLists(
            f"too many allowlist entries: {len(allowlists)} > {ALLOWLIST_MAX_LEN}"
        )
    for allowlist in allowlists:
        if not allowlist.valid():
            logger.debug(f"[ALLOWLIST] Invalid entry kind={allowlist.kind}")
            raise InvalidAllowLists(f"invalid allowlist kind: {allowlist.kind}")


def validate_mint_against_allowlists(
    allowlists: Sequence[Allowlist],
    mint: Pubkey,
    metadata: AccountInfo,
    master_edition: AccountInfo,
) -> NftMetadata:
    """Check `mint` is eligible for a pool with the given allowlists.

    Returns the decoded metadata of the eligible NFT.

    Raises:
        AccountOwnedByWrongProgram: metadata or master edition not owned by
            the Token Metadata program.
        ConstraintSeeds: metadata or master edition is not the PDA of `mint`.
        AccountDidNotDeserialize: metadata data is malformed.
        InvalidMasterEdition: master edition has an unrecognised version.
        InvalidAllowLists: no entry matches, or an entry has an unknown kind.
    """
    program_id = token_metadata_program_id()

    if metadata.owner != program_id:
        raise AccountOwnedByWrongProgram(f"metadata {metadata.key} owned by {metadata.owner}")
    if find_metadata_address(mint)[0] != metadata.key:
        raise ConstraintSeeds(f"metadata {metadata.key} is not derived from mint {mint}")
    if find_master_edition_address(mint)[0] != master_edition.key:
        raise ConstraintSeeds(
            f"master edition {master_edition.key} is not derived from mint {mint}"
        )

    parsed = decode_metadata(metadata.data)

    # no master edition account is fine; if present it must be a master edition
    if not master_edition.data_is_empty:
        if master_edition.owner != program_id:
            raise AccountOwnedByWrongProgram(
                f"master edition {master_edition.key} owned by {master_edition.owner}"
            )
        if master_edition.data[0] not in VALID_MASTER_EDITION_KEYS:
            raise InvalidMasterEdition(f"unexpected edition key {master_edition.data[0]}")

    for allowlist in allowlists:
        if _matches(allowlist, mint, parsed):
            return parsed

    logger.debug(f"[ALLOWLIST] No allowlist entry matched mint {mint}")
    raise InvalidAllowLists(f"mint {mint} does not match any allowlist entry")


def _matches(allowlist: Allowlist, mint: Pubkey, metadata: NftMetadata) -> bool:
    kind = allowlist.kind
    if kind == AllowlistKind.EMPTY:
        return False
    if kind == AllowlistKind.FVCA:
        creator = metadata.first_creator
        return creator is not None and creator.address == allowlist.value and creator.verified
    if kind == AllowlistKind.MINT:
        return mint == allowlist.value
    if kind == AllowlistKind.MCC:
        collection = metadata.collection
        return (
            collection is not None
            and collection.key == allowlist.value
            and collection.verified
        )
    raise InvalidAllowLists(f"invalid allowlist kind: {kind}")
