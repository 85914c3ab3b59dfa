"""Repository layer for database access using the Repository pattern."""

from borrower_ledger.shared.repositories.base import Repository
from borrower_ledger.shared.repositories.borrower import BorrowerRepository
from borrower_ledger.shared.repositories.delegate_share import DelegateShareRepository
from borrower_ledger.shared.repositories.legacy_delegate import LegacyDelegateRepository

__all__ = [
    # Base
    "Repository",
    # Repositories
    "BorrowerRepository",
    "DelegateShareRepository",
    "LegacyDelegateRepository",
]
