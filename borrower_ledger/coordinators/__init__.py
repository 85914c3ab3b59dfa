"""Coordinators that run ledger logic inside an open UnitOfWork.

- borrowers: limit enforcement, borrow/repay, set, paging
- delegates: delegated borrow/repay on top of borrowers
- migration: legacy delegate normalization
- integrity: read-only delegate/borrower consistency audit
"""

from borrower_ledger.coordinators.borrowers import (
    MAX_PAGE_SIZE,
    borrow,
    get_or_create_borrower,
    list_borrowers,
    load_borrower,
    repay,
    save_borrower,
    set_borrower,
)
from borrower_ledger.coordinators.delegates import delegate_borrow, delegate_repay, delegate_shares
from borrower_ledger.coordinators.integrity import IntegrityViolation, find_violations
from borrower_ledger.coordinators.migration import MigrationReport, migrate_legacy_delegates

__all__ = [
    "MAX_PAGE_SIZE",
    "load_borrower",
    "save_borrower",
    "get_or_create_borrower",
    "set_borrower",
    "borrow",
    "repay",
    "list_borrowers",
    "delegate_shares",
    "delegate_borrow",
    "delegate_repay",
    "migrate_legacy_delegates",
    "MigrationReport",
    "find_violations",
    "IntegrityViolation",
]
