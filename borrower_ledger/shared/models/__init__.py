"""Database models for the borrower ledger."""

from borrower_ledger.shared.models.base import UINT128_MAX, Uint128
from borrower_ledger.shared.models.borrower import Borrower
from borrower_ledger.shared.models.delegate_share import DelegateShare
from borrower_ledger.shared.models.legacy_delegate import LegacyDelegate

__all__ = [
    # Column types
    "Uint128",
    "UINT128_MAX",
    # Models
    "Borrower",
    "DelegateShare",
    "LegacyDelegate",
]
