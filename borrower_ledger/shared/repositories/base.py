from collections.abc import Iterable
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from borrower_ledger.shared.repositories.utils import bulk_insert

M = TypeVar("M", bound=SQLModel)


class Repository(Generic[M]):
    _model: type[M]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, record: M) -> M:
        """Upserts by primary key."""
        merged = await self._session.merge(record)
        await self._session.flush()
        return merged

    async def bulk_insert_ignore(self, records: Iterable[M]) -> None:
        """Inserts records, ignoring conflicts."""
        await bulk_insert(
            self._session,
            self._model,  # type: ignore[arg-type]
            records,
            on_conflict="ignore",
        )
