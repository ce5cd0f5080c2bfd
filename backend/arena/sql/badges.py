from collections.abc import Sequence

from arena.database import database
from arena.logic.badges.count_list import check_owner_counts_in_range, decode_owner_ids
from arena.models.db.badge import Badge, BadgeManager, BadgeOwner
from arena.models.db.user import discord_full_name
from arena.utils.id_types import BadgeId, UserId
from arena.utils.logging import logger


async def get_badge_by_id(badge_id: BadgeId) -> Badge | None:
    query = """
        SELECT *
        FROM badges
        WHERE id = :badge_id
    """
    result = await database.fetch_one(query=query, values={"badge_id": badge_id})
    return Badge.model_validate(dict(result._mapping)) if result is not None else None


async def managers_by_badge_id(badge_id: BadgeId) -> list[BadgeManager]:
    query = """
        SELECT u.id, u.discord_name, u.discord_discriminator
        FROM badge_managers bm
        JOIN users u ON u.id = bm.user_id
        WHERE bm.badge_id = :badge_id
        ORDER BY bm.id ASC
    """
    result = await database.fetch_all(query=query, values={"badge_id": badge_id})
    return [
        BadgeManager(
            id=row._mapping["id"],
            discord_full_name=discord_full_name(
                row._mapping["discord_name"], row._mapping["discord_discriminator"]
            ),
        )
        for row in result
    ]


async def owners_by_badge_id(badge_id: BadgeId) -> list[BadgeOwner]:
    query = """
        SELECT u.id, u.discord_name, u.discord_discriminator, bo.count
        FROM badge_owners bo
        JOIN users u ON u.id = bo.user_id
        WHERE bo.badge_id = :badge_id
        ORDER BY bo.count DESC, bo.id ASC
    """
    result = await database.fetch_all(query=query, values={"badge_id": badge_id})
    return [
        BadgeOwner(
            id=row._mapping["id"],
            discord_full_name=discord_full_name(
                row._mapping["discord_name"], row._mapping["discord_discriminator"]
            ),
            count=row._mapping["count"],
        )
        for row in result
    ]


async def upsert_many_managers(badge_id: BadgeId, manager_ids: Sequence[UserId]) -> None:
    """Replace the whole manager set of a badge."""
    async with database.transaction():
        await database.execute(
            "DELETE FROM badge_managers WHERE badge_id = :badge_id",
            values={"badge_id": badge_id},
        )
        if len(manager_ids) > 0:
            await database.execute_many(
                """
                INSERT INTO badge_managers (badge_id, user_id)
                VALUES (:badge_id, :user_id)
                """,
                values=[{"badge_id": badge_id, "user_id": manager_id} for manager_id in manager_ids],
            )

    logger.info(f"Replaced managers of badge {badge_id}: {len(manager_ids)} manager(s)")


async def upsert_many_owners(badge_id: BadgeId, owner_ids: Sequence[UserId]) -> None:
    """
    Replace the whole owner multiset of a badge.

    ``owner_ids`` repeats an id once per unit of count, the same way the edit form
    sends it. Counts above the maximum are rejected before anything is written.
    """
    owners = decode_owner_ids(owner_ids)
    check_owner_counts_in_range(owners)

    async with database.transaction():
        await database.execute(
            "DELETE FROM badge_owners WHERE badge_id = :badge_id",
            values={"badge_id": badge_id},
        )
        if len(owners) > 0:
            await database.execute_many(
                """
                INSERT INTO badge_owners (badge_id, user_id, count)
                VALUES (:badge_id, :user_id, :count)
                """,
                values=[
                    {"badge_id": badge_id, "user_id": owner.user_id, "count": owner.count}
                    for owner in owners
                ],
            )

    logger.info(f"Replaced owners of badge {badge_id}: {len(owners)} owner(s)")
