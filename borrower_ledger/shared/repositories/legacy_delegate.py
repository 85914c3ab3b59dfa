from collections.abc import Sequence

from sqlalchemy.sql.expression import asc, select

from borrower_ledger.shared.models.legacy_delegate import LegacyDelegate
from borrower_ledger.shared.repositories.base import Repository


class LegacyDelegateRepository(Repository[LegacyDelegate]):
    _model = LegacyDelegate

    async def list_all(self) -> Sequence[LegacyDelegate]:
        """Every legacy record in ascending (borrower, delegate) key order."""
        stmt = select(LegacyDelegate).order_by(
            asc(LegacyDelegate.borrower_addr),  # type: ignore[arg-type]
            asc(LegacyDelegate.delegate_addr),  # type: ignore[arg-type]
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()
