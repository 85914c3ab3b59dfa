"""create_delegate_shares

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 12:30:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from borrower_ledger.shared.models.base import Uint128

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | Sequence[str] | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the normalized per (borrower, delegate) share table.

    Populating it from legacy_delegates is BorrowerLedger.migrate(), run once
    after this revision.
    """
    op.create_table(
        "delegate_shares",
        sa.Column("borrower_addr", sa.String(), primary_key=True),
        sa.Column("delegate_addr", sa.String(), primary_key=True),
        sa.Column("shares", Uint128(), nullable=False),
    )


def downgrade() -> None:
    """Drop delegate_shares."""
    op.drop_table("delegate_shares")
