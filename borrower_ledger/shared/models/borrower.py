from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from borrower_ledger.shared.models.base import Uint128


class Borrower(SQLModel, table=True):
    """Borrowing limit and aggregate borrowed shares for one identity.

    ``shares`` counts everything attributed to the borrower, whether borrowed
    directly or through any delegate.
    """

    __tablename__ = "borrowers"

    addr: str = Field(primary_key=True)
    limit: int = Field(default=0, sa_column=Column("limit", Uint128(), nullable=False))
    shares: int = Field(default=0, sa_column=Column("shares", Uint128(), nullable=False))

    def __hash__(self) -> int:
        return hash(self.addr)
