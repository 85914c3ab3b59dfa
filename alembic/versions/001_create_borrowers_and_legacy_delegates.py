"""create_borrowers_and_legacy_delegates

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from borrower_ledger.shared.models.base import Uint128

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create borrowers and the pre-normalization delegate table."""
    op.create_table(
        "borrowers",
        sa.Column("addr", sa.String(), primary_key=True),
        sa.Column("limit", Uint128(), nullable=False),
        sa.Column("shares", Uint128(), nullable=False),
    )

    # Each row embeds a borrower snapshot next to the delegate's shares
    op.create_table(
        "legacy_delegates",
        sa.Column("borrower_addr", sa.String(), primary_key=True),
        sa.Column("delegate_addr", sa.String(), primary_key=True),
        sa.Column("borrower", sa.JSON(), nullable=False),
        sa.Column("shares", Uint128(), nullable=False),
    )


def downgrade() -> None:
    """Drop borrowers and legacy delegate tables."""
    op.drop_table("legacy_delegates")
    op.drop_table("borrowers")
