"""Borrower limit enforcement and aggregate share accounting.

All functions run against an open UnitOfWork; committing or rolling back is
the caller's concern.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from borrower_ledger.errors import BorrowLimitReached, UnauthorizedBorrower
from borrower_ledger.shared.models.base import UINT128_MAX
from borrower_ledger.shared.models.borrower import Borrower
from borrower_ledger.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from borrower_ledger.pool.protocol import PoolValuation

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


async def load_borrower(uow: UnitOfWork, addr: str, *, for_update: bool = False) -> Borrower:
    """Absence of a record means the identity has no borrowing relationship."""
    borrower = await uow.borrowers.get(addr, for_update=for_update)
    if borrower is None:
        raise UnauthorizedBorrower(addr)
    return borrower


async def save_borrower(uow: UnitOfWork, borrower: Borrower) -> Borrower:
    return await uow.borrowers.save(borrower)


async def get_or_create_borrower(uow: UnitOfWork, addr: str) -> Borrower:
    """Existing record, or a new zero-limit zero-share one (not yet persisted)."""
    borrower = await uow.borrowers.get(addr, for_update=True)
    if borrower is None:
        borrower = Borrower(addr=addr, limit=0, shares=0)
    return borrower


async def set_borrower(uow: UnitOfWork, addr: str, limit: int) -> Borrower:
    """Creates the borrower or overwrites only its limit."""
    borrower = await get_or_create_borrower(uow, addr)
    borrower.limit = limit
    borrower = await uow.borrowers.save(borrower)
    logger.info(f"Set borrower {addr}: limit={limit}, shares={borrower.shares}")
    return borrower


async def borrow(
    uow: UnitOfWork, addr: str, pool: "PoolValuation", shares: int
) -> Borrower:
    borrower = await load_borrower(uow, addr, for_update=True)
    return await borrow_for(uow, borrower, pool, shares)


async def borrow_for(
    uow: UnitOfWork, borrower: Borrower, pool: "PoolValuation", shares: int
) -> Borrower:
    """Adds ``shares`` to an already loaded borrower if the projected ownership fits the limit."""
    projected = borrower.shares + shares
    if projected > UINT128_MAX:
        raise OverflowError(f"Borrowed shares overflow for {borrower.addr}: {projected}")

    value = pool.ownership(projected)
    if value > borrower.limit:
        logger.warning(
            f"Borrow rejected for {borrower.addr}: ownership {value} of {projected} shares "
            f"exceeds limit {borrower.limit}"
        )
        raise BorrowLimitReached(borrower.limit)

    borrower.shares = projected
    borrower = await uow.borrowers.save(borrower)
    logger.debug(f"Borrowed {shares} shares for {borrower.addr} (total {borrower.shares})")
    return borrower


async def repay(uow: UnitOfWork, addr: str, shares: int) -> int:
    borrower = await load_borrower(uow, addr, for_update=True)
    return await repay_for(uow, borrower, shares)


async def repay_for(uow: UnitOfWork, borrower: Borrower, shares: int) -> int:
    """Repays at most what is owed; returns the residual ``shares - repaid``."""
    repaid = min(shares, borrower.shares)
    borrower.shares -= repaid
    await uow.borrowers.save(borrower)
    residual = shares - repaid
    logger.debug(
        f"Repaid {repaid} shares for {borrower.addr} "
        f"(total {borrower.shares}, residual {residual})"
    )
    return residual


def resolve_page_limit(limit: int | None) -> int:
    """Default and cap at MAX_PAGE_SIZE."""
    if limit is None:
        return MAX_PAGE_SIZE
    if limit < 0:
        raise ValueError(f"Page limit must be non-negative, got {limit}")
    return min(limit, MAX_PAGE_SIZE)


async def list_borrowers(
    uow: UnitOfWork, limit: int | None = None, start_after: str | None = None
) -> Sequence[Borrower]:
    page_limit = resolve_page_limit(limit)
    if page_limit == 0:
        return []
    return await uow.borrowers.list_page(page_limit, start_after)
