from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from borrower_ledger.shared.models.base import Uint128


class LegacyDelegate(SQLModel, table=True):
    """Pre-normalization delegate record; read only by the migration.

    ``borrower`` is the embedded borrower snapshot ({"addr", "limit", "shares"})
    the old format carried alongside every delegate entry.
    """

    __tablename__ = "legacy_delegates"

    borrower_addr: str = Field(primary_key=True)
    delegate_addr: str = Field(primary_key=True)
    borrower: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    shares: int = Field(default=0, sa_column=Column("shares", Uint128(), nullable=False))

    def __hash__(self) -> int:
        return hash((self.borrower_addr, self.delegate_addr))
