"""Minimal view of a Solana account as seen by an instruction."""

from dataclasses import dataclass, field

from solders.pubkey import Pubkey  # type: ignore[import-untyped]


@dataclass
class AccountInfo:
    """Account address, owning program, balance and raw data."""

    key: Pubkey
    owner: Pubkey
    lamports: int = 0
    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)

    @property
    def data_is_empty(self) -> bool:
        return len(self.data) == 0
