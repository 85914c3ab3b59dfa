"""Shared helpers for ledger tests."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from borrower_ledger import BorrowerLedger, LegacyDelegate, SharePool
from borrower_ledger.pool.protocol import PoolValuation
from borrower_ledger.unit_of_work import UOWFactoryType, create_schema, create_uow_factory

# ownership(x) == x
IDENTITY_POOL = SharePool(size=10**30, shares=10**30)


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@asynccontextmanager
async def fresh_ledger(
    db_path: Path, pool: PoolValuation = IDENTITY_POOL
) -> AsyncIterator[BorrowerLedger]:
    """Ledger over a new SQLite file, disposed on exit."""
    factory = create_uow_factory(sqlite_url(db_path))
    engine = factory().engine
    await create_schema(engine)
    try:
        yield BorrowerLedger(factory, pool)
    finally:
        await engine.dispose()


async def seed_legacy(uow_factory: UOWFactoryType, entries: dict[tuple[str, str], int]) -> None:
    """Write legacy delegate rows keyed (borrower, delegate) -> shares."""
    async with uow_factory() as uow:
        await uow.legacy_delegates.bulk_insert_ignore(
            LegacyDelegate(
                borrower_addr=borrower,
                delegate_addr=delegate,
                borrower={"addr": borrower, "limit": 0, "shares": shares},
                shares=shares,
            )
            for (borrower, delegate), shares in entries.items()
        )
