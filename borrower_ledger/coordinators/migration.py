"""One-time normalization of legacy delegate records."""

import logging
from dataclasses import dataclass, field

from borrower_ledger.errors import RecordNotFound
from borrower_ledger.shared.models.delegate_share import DelegateShare
from borrower_ledger.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass
class MigrationReport:
    delegates_migrated: int = 0
    borrowers_updated: int = 0
    # addr -> (stored shares before, recomputed shares)
    overwritten_totals: dict[str, tuple[int, int]] = field(default_factory=dict)


async def migrate_legacy_delegates(uow: UnitOfWork) -> MigrationReport:
    """Copy legacy delegate shares and recompute borrower totals from them.

    Each referenced borrower's ``shares`` is replaced by the sum of its legacy
    delegate entries. Anything it held beyond that (direct borrowing) is
    dropped; such borrowers are reported and logged, not reconciled.

    Raises:
        RecordNotFound: If a legacy record references a borrower with no record.
    """
    legacy_records = await uow.legacy_delegates.list_all()
    logger.info(f"Migrating {len(legacy_records)} legacy delegate records")

    entries: list[DelegateShare] = []
    totals: dict[str, int] = {}
    for record in legacy_records:
        entries.append(
            DelegateShare(
                borrower_addr=record.borrower_addr,
                delegate_addr=record.delegate_addr,
                shares=record.shares,
            )
        )
        totals[record.borrower_addr] = totals.get(record.borrower_addr, 0) + record.shares

    await uow.delegate_shares.upsert_many(entries)

    report = MigrationReport(delegates_migrated=len(entries))
    for addr, total in totals.items():
        borrower = await uow.borrowers.get(addr, for_update=True)
        if borrower is None:
            raise RecordNotFound("borrowers", addr)

        if borrower.shares != total:
            report.overwritten_totals[addr] = (borrower.shares, total)
            logger.warning(
                f"Borrower {addr} shares overwritten by migration: {borrower.shares} -> {total}"
            )

        borrower.shares = total
        await uow.borrowers.save(borrower)
        report.borrowers_updated += 1

    logger.info(
        f"Migration completed: {report.delegates_migrated} delegate entries, "
        f"{report.borrowers_updated} borrowers, "
        f"{len(report.overwritten_totals)} totals changed"
    )
    return report
