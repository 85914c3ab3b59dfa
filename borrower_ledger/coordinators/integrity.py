"""Read-only audit of the delegate/borrower share relationship."""

import logging
from dataclasses import dataclass

from borrower_ledger.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

MISSING_BORROWER = "missing_borrower"
DELEGATE_EXCEEDS_BORROWER = "delegate_exceeds_borrower"


@dataclass(frozen=True)
class IntegrityViolation:
    borrower_addr: str
    delegate_addr: str
    delegate_shares: int
    borrower_shares: int | None
    reason: str


async def find_violations(uow: UnitOfWork) -> list[IntegrityViolation]:
    """Delegate entries that exceed, or have no, borrower aggregate."""
    entries = await uow.delegate_shares.list_all()
    borrowers = await uow.borrowers.get_many(sorted({e.borrower_addr for e in entries}))

    violations: list[IntegrityViolation] = []
    for entry in entries:
        borrower = borrowers.get(entry.borrower_addr)
        if borrower is None:
            violations.append(
                IntegrityViolation(
                    borrower_addr=entry.borrower_addr,
                    delegate_addr=entry.delegate_addr,
                    delegate_shares=entry.shares,
                    borrower_shares=None,
                    reason=MISSING_BORROWER,
                )
            )
        elif entry.shares > borrower.shares:
            violations.append(
                IntegrityViolation(
                    borrower_addr=entry.borrower_addr,
                    delegate_addr=entry.delegate_addr,
                    delegate_shares=entry.shares,
                    borrower_shares=borrower.shares,
                    reason=DELEGATE_EXCEEDS_BORROWER,
                )
            )

    if violations:
        logger.warning(f"Found {len(violations)} delegate share violations")
    else:
        logger.debug(f"Checked {len(entries)} delegate entries, no violations")
    return violations
