"""add users and badge tables

Revision ID: 4c1e7b2a9d30
Revises:
Create Date: 2026-09-28 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1e7b2a9d30"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

account_type_enum = ENUM("REGULAR", "ADMIN", name="account_type", create_type=False)


def upgrade() -> None:
    account_type_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("discord_name", sa.String(), nullable=False),
        sa.Column("discord_discriminator", sa.String(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("account_type", account_type_enum, server_default="REGULAR", nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_discord_name"), "users", ["discord_name"], unique=False)

    op.create_table(
        "badges",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )
    op.create_index(op.f("ix_badges_id"), "badges", ["id"], unique=False)

    op.create_table(
        "badge_managers",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("badge_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["badge_id"], ["badges.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("badge_id", "user_id", name="badge_managers_badge_id_user_id_key"),
    )
    op.create_index(op.f("ix_badge_managers_id"), "badge_managers", ["id"], unique=False)
    op.create_index(op.f("ix_badge_managers_badge_id"), "badge_managers", ["badge_id"], unique=False)
    op.create_index(op.f("ix_badge_managers_user_id"), "badge_managers", ["user_id"], unique=False)

    op.create_table(
        "badge_owners",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("badge_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["badge_id"], ["badges.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("badge_id", "user_id", name="badge_owners_badge_id_user_id_key"),
        sa.CheckConstraint("count > 0 AND count <= 100", name="badge_owners_count_range"),
    )
    op.create_index(op.f("ix_badge_owners_id"), "badge_owners", ["id"], unique=False)
    op.create_index(op.f("ix_badge_owners_badge_id"), "badge_owners", ["badge_id"], unique=False)
    op.create_index(op.f("ix_badge_owners_user_id"), "badge_owners", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_table("badge_owners")
    op.drop_table("badge_managers")
    op.drop_table("badges")
    op.drop_table("users")
    account_type_enum.drop(op.get_bind(), checkfirst=True)
