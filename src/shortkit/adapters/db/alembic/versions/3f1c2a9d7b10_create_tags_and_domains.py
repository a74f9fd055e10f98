"""create tags and domains tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 11:02:14.518302

"""

# pylint: disable=invalid-name,no-member

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from shortkit.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "tags",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Canonical tag name.",
        ),
        sa.Column(
            "created_at",
            UTCDateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_tags")),
        sa.UniqueConstraint("name", name=op.f("uq_tags_name")),
        comment="Tags attached to short URLs.",
    )
    op.create_table(
        "domains",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column(
            "authority",
            sa.String(length=512),
            nullable=False,
            comment="Host (and optional port) short URLs are served from.",
        ),
        sa.Column(
            "created_at",
            UTCDateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_domains")),
        sa.UniqueConstraint("authority", name=op.f("uq_domains_authority")),
        comment="Non-default domains.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("domains")
    op.drop_table("tags")
