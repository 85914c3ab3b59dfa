from collections.abc import Iterable, Sequence

from sqlalchemy.sql.expression import asc, select

from borrower_ledger.shared.models.delegate_share import DelegateShare
from borrower_ledger.shared.repositories.base import Repository
from borrower_ledger.shared.repositories.utils import bulk_insert


class DelegateShareRepository(Repository[DelegateShare]):
    _model = DelegateShare

    async def get(self, borrower_addr: str, delegate_addr: str) -> DelegateShare | None:
        return await self._session.get(DelegateShare, (borrower_addr, delegate_addr))

    async def get_shares(self, borrower_addr: str, delegate_addr: str) -> int:
        """Zero when the pair has never borrowed."""
        entry = await self.get(borrower_addr, delegate_addr)
        return entry.shares if entry is not None else 0

    async def list_all(self) -> Sequence[DelegateShare]:
        stmt = select(DelegateShare).order_by(
            asc(DelegateShare.borrower_addr),  # type: ignore[arg-type]
            asc(DelegateShare.delegate_addr),  # type: ignore[arg-type]
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def upsert_many(self, entries: Iterable[DelegateShare]) -> None:
        """Overwrites shares on conflict."""
        await bulk_insert(
            self._session,
            DelegateShare,
            entries,
            conflict_target=["borrower_addr", "delegate_addr"],
            on_conflict="update",
            update_fields=["shares"],
        )
