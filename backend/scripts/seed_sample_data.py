#!/usr/bin/env python3
import argparse
import asyncio

from heliclockter import datetime_utc, timedelta

from arena.database import database
from arena.models.db.account import UserAccountType
from arena.models.db.user import UserInsertable, UserPublic
from arena.routes.auth import create_access_token_for_user
from arena.schema import badges
from arena.sql.badges import upsert_many_managers, upsert_many_owners
from arena.sql.calendar_events import sql_create_calendar_event
from arena.sql.tournament_teams import create_team
from arena.sql.users import create_user
from arena.utils.alembic import alembic_run_migrations
from arena.utils.id_types import BadgeId

SAMPLE_DISCORD_NAMES = [
    "sendou",
    "inkling_sam",
    "octo_ace",
    "squidkid42",
    "marina",
    "pearl",
    "callie",
    "marie",
]


async def get_or_create_user(
    discord_name: str, account_type: UserAccountType = UserAccountType.REGULAR
) -> UserPublic:
    row = await database.fetch_one(
        "SELECT * FROM users WHERE lower(discord_name) = lower(:discord_name)",
        values={"discord_name": discord_name},
    )
    if row is not None:
        return UserPublic.model_validate(dict(row._mapping))

    return await create_user(
        UserInsertable(
            name=discord_name,
            discord_name=discord_name,
            discord_discriminator="0",
            created=datetime_utc.now(),
            account_type=account_type,
        )
    )


async def get_or_create_badge(code: str, display_name: str) -> BadgeId:
    row = await database.fetch_one(
        "SELECT id FROM badges WHERE code = :code", values={"code": code}
    )
    if row is not None:
        return BadgeId(int(row._mapping["id"]))

    badge_id = await database.execute(
        query=badges.insert(),
        values={"code": code, "display_name": display_name, "created": datetime_utc.now()},
    )
    return BadgeId(int(badge_id))


async def seed(user_count: int) -> None:
    admin = await get_or_create_user(SAMPLE_DISCORD_NAMES[0], UserAccountType.ADMIN)
    sample_users = [
        await get_or_create_user(name) for name in SAMPLE_DISCORD_NAMES[1:user_count]
    ]
    print(f"Seeded {len(sample_users) + 1} users, admin is {admin.discord_full_name}")

    badge_id = await get_or_create_badge("splat_zones_winner", "Splat Zones Winner")
    await upsert_many_managers(badge_id, [sample_users[0].id])
    # Second user owns the badge twice.
    await upsert_many_owners(
        badge_id, [sample_users[0].id, sample_users[1].id, sample_users[1].id]
    )
    print(f"Seeded badge {badge_id} with 1 manager and 2 owners")

    event = await sql_create_calendar_event(
        "In The Zone", datetime_utc.now() + timedelta(days=7), admin.id
    )
    team = await create_team(event.id, sample_users[0].id)
    print(f"Seeded calendar event {event.id} with team {team.id} (invite code {team.invite_code})")

    token = create_access_token_for_user(admin.id)
    print(f"Admin bearer token: {token.access_token}")


async def async_main() -> None:
    parser = argparse.ArgumentParser(
        description="Seed sample data: users, a badge with managers/owners and a calendar event."
    )
    parser.add_argument(
        "--run-migrations",
        action="store_true",
        help="Upgrade the database before seeding.",
    )
    parser.add_argument("--revision", type=str, default="head")
    parser.add_argument("--sample-users", type=int, default=4)
    args = parser.parse_args()

    if not 3 <= args.sample_users <= len(SAMPLE_DISCORD_NAMES):
        raise ValueError(f"--sample-users must be between 3 and {len(SAMPLE_DISCORD_NAMES)}")

    if args.run_migrations:
        alembic_run_migrations(args.revision)

    await database.connect()
    try:
        await seed(int(args.sample_users))
    finally:
        await database.disconnect()


if __name__ == "__main__":
    asyncio.run(async_main())
