"""add calendar events and tournament teams

Revision ID: 9e3f5a0c6b17
Revises: 4c1e7b2a9d30
Create Date: 2026-10-02 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9e3f5a0c6b17"
down_revision: str | None = "4c1e7b2a9d30"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "calendar_events",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("author_id", sa.BigInteger(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_calendar_events_id"), "calendar_events", ["id"], unique=False)
    op.create_index(op.f("ix_calendar_events_name"), "calendar_events", ["name"], unique=False)

    op.create_table(
        "tournament_teams",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("calendar_event_id", sa.BigInteger(), nullable=False),
        sa.Column("invite_code", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["calendar_event_id"], ["calendar_events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("invite_code", name="tournament_teams_invite_code_key"),
    )
    op.create_index(op.f("ix_tournament_teams_id"), "tournament_teams", ["id"], unique=False)
    op.create_index(
        op.f("ix_tournament_teams_calendar_event_id"),
        "tournament_teams",
        ["calendar_event_id"],
        unique=False,
    )

    op.create_table(
        "tournament_team_members",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("tournament_team_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("is_owner", sa.Boolean(), server_default="f", nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["tournament_team_id"], ["tournament_teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "tournament_team_id",
            "user_id",
            name="tournament_team_members_tournament_team_id_user_id_key",
        ),
    )
    op.create_index(
        op.f("ix_tournament_team_members_id"), "tournament_team_members", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_tournament_team_members_tournament_team_id"),
        "tournament_team_members",
        ["tournament_team_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_tournament_team_members_user_id"),
        "tournament_team_members",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_table("tournament_team_members")
    op.drop_table("tournament_teams")
    op.drop_table("calendar_events")
