"""Ledger error taxonomy.

Storage faults other than the not-found cases below surface as
``sqlalchemy.exc.SQLAlchemyError`` and are never wrapped.
"""

from typing import Any


class LedgerError(Exception):
    """Base class for all borrower ledger failures."""


class UnauthorizedBorrower(LedgerError):
    """No borrower record exists for the identity."""

    def __init__(self, addr: str) -> None:
        super().__init__(f"Unauthorized borrower: {addr}")
        self.addr = addr


class BorrowLimitReached(LedgerError):
    """Projected ownership value would exceed the borrower's limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Borrow limit reached: {limit}")
        self.limit = limit


class Underflow(LedgerError, ArithmeticError):
    """Checked subtraction would go below zero."""

    def __init__(self, minuend: int, subtrahend: int) -> None:
        super().__init__(f"Cannot subtract {subtrahend} from {minuend}")
        self.minuend = minuend
        self.subtrahend = subtrahend


class RecordNotFound(LedgerError):
    """Generic lookup failure for a keyed record."""

    def __init__(self, table: str, key: Any) -> None:
        super().__init__(f"{table} not found: {key!r}")
        self.table = table
        self.key = key


def checked_sub(minuend: int, subtrahend: int) -> int:
    if subtrahend > minuend:
        raise Underflow(minuend, subtrahend)
    return minuend - subtrahend
