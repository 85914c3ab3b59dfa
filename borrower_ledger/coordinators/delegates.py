"""Delegated borrow/repay.

The delegate entry is a breakdown of part of the borrower's aggregate shares;
every change to it is paired with the same change to the borrower.
"""

import logging
from typing import TYPE_CHECKING

from borrower_ledger.coordinators.borrowers import borrow_for, load_borrower, repay_for
from borrower_ledger.errors import RecordNotFound, checked_sub
from borrower_ledger.shared.models.base import UINT128_MAX
from borrower_ledger.shared.models.borrower import Borrower
from borrower_ledger.shared.models.delegate_share import DelegateShare
from borrower_ledger.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from borrower_ledger.pool.protocol import PoolValuation

logger = logging.getLogger(__name__)


async def delegate_shares(uow: UnitOfWork, addr: str, delegate: str) -> int:
    return await uow.delegate_shares.get_shares(addr, delegate)


async def delegate_borrow(
    uow: UnitOfWork, addr: str, delegate: str, pool: "PoolValuation", shares: int
) -> Borrower:
    """Credits the delegate entry, then borrows on the borrower.

    The delegate write lands before the limit check; a rejected borrow relies on
    the enclosing UnitOfWork rolling both writes back.
    """
    borrower = await load_borrower(uow, addr, for_update=True)

    entry = await uow.delegate_shares.get(addr, delegate)
    if entry is None:
        entry = DelegateShare(borrower_addr=addr, delegate_addr=delegate, shares=0)
    if entry.shares + shares > UINT128_MAX:
        raise OverflowError(f"Delegate shares overflow for {addr}/{delegate}")
    entry.shares += shares
    entry = await uow.delegate_shares.save(entry)
    logger.debug(f"Delegate {delegate} of {addr} credited {shares} shares (total {entry.shares})")

    return await borrow_for(uow, borrower, pool, shares)


async def delegate_repay(uow: UnitOfWork, addr: str, delegate: str, shares: int) -> int:
    """Repays at most what the delegate owes; returns the residual."""
    borrower = await load_borrower(uow, addr, for_update=True)

    entry = await uow.delegate_shares.get(addr, delegate)
    if entry is None:
        raise RecordNotFound("delegate_shares", (addr, delegate))

    repaid = min(shares, entry.shares)
    entry.shares = checked_sub(entry.shares, repaid)
    await uow.delegate_shares.save(entry)
    logger.debug(f"Delegate {delegate} of {addr} repaid {repaid} shares (total {entry.shares})")

    await repay_for(uow, borrower, repaid)
    return shares - repaid
