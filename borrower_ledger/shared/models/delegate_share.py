from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from borrower_ledger.shared.models.base import Uint128


class DelegateShare(SQLModel, table=True):
    """Shares a borrower has taken on through one delegate."""

    __tablename__ = "delegate_shares"

    borrower_addr: str = Field(primary_key=True)
    delegate_addr: str = Field(primary_key=True)
    shares: int = Field(default=0, sa_column=Column("shares", Uint128(), nullable=False))

    def __hash__(self) -> int:
        return hash((self.borrower_addr, self.delegate_addr))
