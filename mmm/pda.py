"""Program-derived addresses for pools, escrows and Metaplex accounts."""

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from config.settings import settings
from mmm.constants import BUYSIDE_SOL_ESCROW_ACCOUNT_PREFIX, POOL_PREFIX
from mmm.metaplex.constants import EDITION_SUFFIX, METADATA_PREFIX


def mmm_program_id() -> Pubkey:
    return Pubkey.from_string(settings.mmm_program_id)


def token_metadata_program_id() -> Pubkey:
    return Pubkey.from_string(settings.token_metadata_program_id)


def find_pool_address(owner: Pubkey, uuid: Pubkey) -> tuple[Pubkey, int]:
    return Pubkey.find_program_address(
        [POOL_PREFIX, bytes(owner), bytes(uuid)], mmm_program_id()
    )


def find_buyside_escrow_address(pool: Pubkey) -> tuple[Pubkey, int]:
    return Pubkey.find_program_address(
        [BUYSIDE_SOL_ESCROW_ACCOUNT_PREFIX, bytes(pool)], mmm_program_id()
    )


def find_metadata_address(mint: Pubkey) -> tuple[Pubkey, int]:
    program_id = token_metadata_program_id()
    return Pubkey.find_program_address(
        [METADATA_PREFIX, bytes(program_id), bytes(mint)], program_id
    )


def find_master_edition_address(mint: Pubkey) -> tuple[Pubkey, int]:
    program_id = token_metadata_program_id()
    return Pubkey.find_program_address(
        [METADATA_PREFIX, bytes(program_id), bytes(mint), EDITION_SUFFIX], program_id
    )
