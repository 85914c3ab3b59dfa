"""Unit of Work implementation for the borrower ledger.

Every public ledger operation runs inside exactly one UnitOfWork, which is the
transaction boundary: all of the call's writes commit together or not at all.
"""

import asyncio
from collections.abc import Callable
from types import TracebackType
from typing import Any, Self, cast

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from borrower_ledger.settings import resolve_engine_kwargs, resolve_session_kwargs
from borrower_ledger.shared.repositories import (
    BorrowerRepository,
    DelegateShareRepository,
    LegacyDelegateRepository,
)

# Type alias for UoW factory function
UOWFactoryType = Callable[[], "UnitOfWork"]


def setup_db_session(
    db_connection: str,
    session_kwargs: dict[str, Any] | None = None,
    engine_kwargs: dict[str, Any] | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Create a SQLAlchemy async session factory."""
    engine = create_async_engine(db_connection, **resolve_engine_kwargs(db_connection, engine_kwargs))
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        **resolve_session_kwargs(session_kwargs),
    )


def create_uow_factory(
    db_connection: str,
    session_kwargs: dict[str, Any] | None = None,
    engine_kwargs: dict[str, Any] | None = None,
) -> UOWFactoryType:
    """Create a factory function that produces UnitOfWork instances.

    Args:
        db_connection: Database connection string
        session_kwargs: Additional kwargs for async_sessionmaker (optional)
        engine_kwargs: Additional kwargs for create_async_engine (optional)

    Returns:
        A factory function that creates UnitOfWork instances
    """
    session_factory = setup_db_session(
        db_connection,
        session_kwargs=session_kwargs,
        engine_kwargs=engine_kwargs,
    )

    def _create_uow() -> UnitOfWork:
        return UnitOfWork(session_factory)

    return _create_uow


async def create_schema(engine: AsyncEngine) -> None:
    """Create every ledger table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


class UnitOfWork:
    """Unit of Work for the borrower ledger.

    Encapsulates the ledger repositories and manages transaction boundaries.

    Repositories:
        - borrowers: Borrower limits and aggregate shares
        - delegate_shares: Per (borrower, delegate) share breakdown
        - legacy_delegates: Pre-normalization delegate records (migration input)

    Usage:
        async with uow_factory() as uow:
            borrower = await uow.borrowers.get("alice")
            shares = await uow.delegate_shares.get_shares("alice", "bot")
    """

    borrowers: BorrowerRepository
    delegate_shares: DelegateShareRepository
    legacy_delegates: LegacyDelegateRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize UnitOfWork with a session factory.

        Args:
            session_factory: SQLAlchemy async sessionmaker for creating database sessions
        """
        self._session_factory: async_sessionmaker[AsyncSession] = session_factory

    @property
    def engine(self) -> AsyncEngine:
        return cast(AsyncEngine, self._session_factory.kw["bind"])

    async def __aenter__(self) -> Self:
        """Initialize session and all repositories.

        Returns:
            Self: UnitOfWork instance with initialized repositories
        """
        self._session: AsyncSession = self._session_factory()

        self.borrowers = BorrowerRepository(self._session)
        self.delegate_shares = DelegateShareRepository(self._session)
        self.legacy_delegates = LegacyDelegateRepository(self._session)

        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Handle transaction completion and cleanup.

        Automatically commits the transaction if no exception occurred,
        otherwise rolls back. Always closes the session safely.
        """
        try:
            if exc_val:
                await self.rollback()
            else:
                await self.commit()
        finally:
            await self._close()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self._session.rollback()

    async def _close(self) -> None:
        """Close the session with cancellation protection.

        Uses asyncio.shield so cleanup completes even if the task is cancelled,
        preventing connection leaks.
        """
        await asyncio.shield(self._session.close())

    async def execute_raw(
        self, query: str, params: dict[str, Any] | tuple[Any, ...] | None = None
    ) -> object:
        """Execute raw SQL query.

        Args:
            query: SQL query string
            params: Optional query parameters

        Returns:
            Query execution result
        """
        return await self._session.execute(text(query), params)
