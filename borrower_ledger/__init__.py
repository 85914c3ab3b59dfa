"""Borrower share ledger with limit enforcement and delegated borrowing."""

from borrower_ledger.bootstrap import bootstrap
from borrower_ledger.coordinators.integrity import IntegrityViolation
from borrower_ledger.coordinators.migration import MigrationReport
from borrower_ledger.errors import (
    BorrowLimitReached,
    LedgerError,
    RecordNotFound,
    UnauthorizedBorrower,
    Underflow,
)
from borrower_ledger.ledger import BorrowerLedger
from borrower_ledger.pool import PoolValuation, SharePool
from borrower_ledger.shared.models import Borrower, DelegateShare, LegacyDelegate

__all__ = [
    "bootstrap",
    "BorrowerLedger",
    # Errors
    "LedgerError",
    "UnauthorizedBorrower",
    "BorrowLimitReached",
    "Underflow",
    "RecordNotFound",
    # Models
    "Borrower",
    "DelegateShare",
    "LegacyDelegate",
    # Pool
    "PoolValuation",
    "SharePool",
    # Reports
    "MigrationReport",
    "IntegrityViolation",
]
