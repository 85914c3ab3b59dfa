from collections.abc import Sequence

from sqlalchemy.sql.expression import asc, select

from borrower_ledger.shared.models.borrower import Borrower
from borrower_ledger.shared.repositories.base import Repository


class BorrowerRepository(Repository[Borrower]):
    _model = Borrower

    async def get(self, addr: str, *, for_update: bool = False) -> Borrower | None:
        """Returns None when absent; callers decide what absence means."""
        stmt = select(Borrower).where(Borrower.addr == addr)  # type: ignore[arg-type]
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(self, limit: int, start_after: str | None = None) -> Sequence[Borrower]:
        """Ascending by addr, exclusive of ``start_after``."""
        stmt = select(Borrower).order_by(asc(Borrower.addr)).limit(limit)  # type: ignore[arg-type]
        if start_after is not None:
            stmt = stmt.where(Borrower.addr > start_after)  # type: ignore[arg-type]
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def get_many(self, addrs: Sequence[str]) -> dict[str, Borrower]:
        if not addrs:
            return {}
        stmt = select(Borrower).where(Borrower.addr.in_(addrs))  # type: ignore[attr-defined]
        result = await self._session.execute(stmt)
        return {borrower.addr: borrower for borrower in result.scalars().all()}
