"""Pool closure once it holds neither assets nor buy-side funds."""

from collections.abc import Callable
from enum import Enum

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from mmm.errors import ConstraintSeeds
from mmm.models.account import AccountInfo
from mmm.pda import find_buyside_escrow_address, find_pool_address
from mmm.pool.layout import decode_pool

# (source, destination, lamports) -> None; raises on failure
LamportTransfer = Callable[[Pubkey, Pubkey, int], None]


class CloseOutcome(Enum):
    CLOSED = "closed"
    NOT_ELIGIBLE = "not_eligible"


def read_buyside_escrow_balance(pool_key: Pubkey, escrow_account: AccountInfo) -> int:
    """Lamports held in the buy-side SOL escrow of the pool at `pool_key`.

    Raises:
        ConstraintSeeds: `escrow_account` is not the escrow PDA of the pool.
    """
    escrow_key, _bump = find_buyside_escrow_address(pool_key)
    if escrow_account.key != escrow_key:
        raise ConstraintSeeds(
            f"escrow account {escrow_account.key} is not the buy-side escrow PDA {escrow_key}"
        )
    return escrow_account.lamports


def try_close_pool(
    pool_account: AccountInfo,
    sellside_orders_count: int,
    buyside_escrow_balance: int,
    *,
    transfer: LamportTransfer,
) -> CloseOutcome:
    """Return the pool's lamports to its owner and zero its data, if empty.

    The transfer runs first: the owner and uuid needed to sign for the pool
    address live in the data that gets zeroed. If `transfer` raises, the
    exception propagates and the account data is left untouched.
    """
    if sellside_orders_count != 0:
        return CloseOutcome.NOT_ELIGIBLE

    if buyside_escrow_balance != 0:
        return CloseOutcome.NOT_ELIGIBLE

    pool = decode_pool(pool_account.data)
    pool_key, _bump = find_pool_address(pool.owner, pool.uuid)
    if pool_key != pool_account.key:
        raise ConstraintSeeds(f"pool account {pool_account.key} is not the pool PDA {pool_key}")

    lamports = pool_account.lamports
    transfer(pool_account.key, pool.owner, lamports)

    pool_account.data[:] = bytes(len(pool_account.data))
    logger.info(f"[POOL] Closed pool {pool_account.key}, returned {lamports} lamports to {pool.owner}")
    return CloseOutcome.CLOSED
