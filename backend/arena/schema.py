from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Table, UniqueConstraint, func
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import BigInteger, Boolean, DateTime, Enum, Integer

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

users = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("discord_name", String, nullable=False, index=True),
    Column("discord_discriminator", String, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column(
        "account_type",
        Enum(
            "REGULAR",
            "ADMIN",
            name="account_type",
        ),
        nullable=False,
        server_default="REGULAR",
    ),
)

badges = Table(
    "badges",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("code", String, nullable=False, unique=True),
    Column("display_name", String, nullable=False),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

badge_managers = Table(
    "badge_managers",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("badge_id", BigInteger, ForeignKey("badges.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False),
    UniqueConstraint("badge_id", "user_id", name="badge_managers_badge_id_user_id_key"),
)

badge_owners = Table(
    "badge_owners",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("badge_id", BigInteger, ForeignKey("badges.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("count", Integer, nullable=False),
    UniqueConstraint("badge_id", "user_id", name="badge_owners_badge_id_user_id_key"),
    CheckConstraint("count > 0 AND count <= 100", name="badge_owners_count_range"),
)

calendar_events = Table(
    "calendar_events",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("name", String, nullable=False, index=True),
    Column("start_time", DateTimeTZ, nullable=False),
    Column("author_id", BigInteger, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

tournament_teams = Table(
    "tournament_teams",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column(
        "calendar_event_id",
        BigInteger,
        ForeignKey("calendar_events.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    ),
    Column("invite_code", String, nullable=False),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("invite_code", name="tournament_teams_invite_code_key"),
)

tournament_team_members = Table(
    "tournament_team_members",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column(
        "tournament_team_id",
        BigInteger,
        ForeignKey("tournament_teams.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    ),
    Column("user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False),
    Column("is_owner", Boolean, nullable=False, server_default="f"),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint(
        "tournament_team_id",
        "user_id",
        name="tournament_team_members_tournament_team_id_user_id_key",
    ),
)
