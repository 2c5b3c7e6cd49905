from mmm.models.account import AccountInfo
from mmm.models.allowlist import Allowlist, AllowlistKind
from mmm.models.pool import CurveKind, Pool

__all__ = [
    "AccountInfo",
    "Allowlist",
    "AllowlistKind",
    "CurveKind",
    "Pool",
]
