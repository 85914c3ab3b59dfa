"""Borrower ledger facade.

Each public method is one external call: it takes the ledger lock, opens a
UnitOfWork, and commits only if every step succeeds.
"""

import asyncio
import logging
from collections.abc import AsyncIterator

from borrower_ledger.coordinators import borrowers, delegates, integrity, migration
from borrower_ledger.pool.protocol import PoolValuation
from borrower_ledger.shared.models.base import UINT128_MAX
from borrower_ledger.shared.models.borrower import Borrower
from borrower_ledger.unit_of_work import UOWFactoryType

logger = logging.getLogger(__name__)


def _require_amount(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT128_MAX:
        raise ValueError(f"{name} out of range: {value}")
    return value


class BorrowerLedger:
    """Borrower and delegate share ledger over a SQL store."""

    def __init__(
        self,
        uow_factory: UOWFactoryType,
        pool: PoolValuation,
        lock: asyncio.Lock | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self.pool = pool
        self._lock = lock or asyncio.Lock()

    async def load(self, addr: str) -> Borrower:
        """Raises UnauthorizedBorrower if ``addr`` has no record."""
        async with self._lock, self._uow_factory() as uow:
            return await borrowers.load_borrower(uow, addr)

    async def save(self, borrower: Borrower) -> Borrower:
        _require_amount("limit", borrower.limit)
        _require_amount("shares", borrower.shares)
        async with self._lock, self._uow_factory() as uow:
            return await borrowers.save_borrower(uow, borrower)

    async def set(self, addr: str, limit: int) -> Borrower:
        _require_amount("limit", limit)
        async with self._lock, self._uow_factory() as uow:
            return await borrowers.set_borrower(uow, addr, limit)

    async def borrow(self, addr: str, shares: int, pool: PoolValuation | None = None) -> Borrower:
        """Raises BorrowLimitReached, leaving the borrower untouched, if the limit would be exceeded."""
        _require_amount("shares", shares)
        async with self._lock, self._uow_factory() as uow:
            return await borrowers.borrow(uow, addr, pool or self.pool, shares)

    async def repay(self, addr: str, shares: int) -> int:
        """Returns the residual: requested shares beyond what was owed."""
        _require_amount("shares", shares)
        async with self._lock, self._uow_factory() as uow:
            return await borrowers.repay(uow, addr, shares)

    async def delegate_shares(self, addr: str, delegate: str) -> int:
        async with self._lock, self._uow_factory() as uow:
            return await delegates.delegate_shares(uow, addr, delegate)

    async def delegate_borrow(
        self, addr: str, delegate: str, shares: int, pool: PoolValuation | None = None
    ) -> Borrower:
        _require_amount("shares", shares)
        async with self._lock, self._uow_factory() as uow:
            return await delegates.delegate_borrow(uow, addr, delegate, pool or self.pool, shares)

    async def delegate_repay(self, addr: str, delegate: str, shares: int) -> int:
        """Raises RecordNotFound if the pair has never borrowed."""
        _require_amount("shares", shares)
        async with self._lock, self._uow_factory() as uow:
            return await delegates.delegate_repay(uow, addr, delegate, shares)

    async def list_borrowers(
        self, limit: int | None = None, start_after: str | None = None
    ) -> list[Borrower]:
        """One page ascending by addr; ``limit`` defaults to and is capped at 100."""
        async with self._lock, self._uow_factory() as uow:
            return list(await borrowers.list_borrowers(uow, limit, start_after))

    async def iter_borrowers(self, page_size: int | None = None) -> AsyncIterator[Borrower]:
        """Every borrower, chaining the last addr of each page as the next cursor."""
        if borrowers.resolve_page_limit(page_size) == 0:
            raise ValueError("page_size must be positive")
        cursor: str | None = None
        while True:
            page = await self.list_borrowers(page_size, cursor)
            for borrower in page:
                yield borrower
            if len(page) < borrowers.resolve_page_limit(page_size):
                return
            cursor = page[-1].addr

    async def migrate(self) -> migration.MigrationReport:
        async with self._lock, self._uow_factory() as uow:
            return await migration.migrate_legacy_delegates(uow)

    async def check_integrity(self) -> list[integrity.IntegrityViolation]:
        async with self._lock, self._uow_factory() as uow:
            return await integrity.find_violations(uow)

    async def close(self) -> None:
        """Dispose the engine's connection pool."""
        await self._uow_factory().engine.dispose()
