from typing import Any

from heliclockter import datetime_utc

from arena.database import database
from arena.models.db.tournament_team import (
    TEAM_FULL_ROSTER_SIZE,
    RosterMember,
    TournamentTeam,
    TournamentTeamWithRoster,
)
from arena.models.db.user import discord_full_name
from arena.utils.errors import (
    AlreadyRegistered,
    TeamRosterFull,
    UniqueIndex,
    check_unique_violation,
)
from arena.utils.id_types import CalendarEventId, TournamentTeamId, UserId
from arena.utils.logging import logger
from arena.utils.security import generate_invite_code


async def _get_teams_with_roster(
    filter_: str, values: dict[str, Any]
) -> list[TournamentTeamWithRoster]:
    query = f"""
        SELECT
            t.id,
            t.calendar_event_id,
            t.invite_code,
            t.created,
            m.user_id,
            m.is_owner,
            u.discord_name,
            u.discord_discriminator
        FROM tournament_teams t
        LEFT JOIN tournament_team_members m ON m.tournament_team_id = t.id
        LEFT JOIN users u ON u.id = m.user_id
        WHERE {filter_}
        ORDER BY t.id ASC, m.is_owner DESC, m.id ASC
        """
    result = await database.fetch_all(query=query, values=values)

    teams: dict[TournamentTeamId, TournamentTeamWithRoster] = {}
    for row in result:
        mapping = row._mapping
        team = teams.get(mapping["id"])
        if team is None:
            team = TournamentTeamWithRoster(
                id=mapping["id"],
                calendar_event_id=mapping["calendar_event_id"],
                invite_code=mapping["invite_code"],
                created=mapping["created"],
                roster=[],
            )
            teams[team.id] = team

        if mapping["user_id"] is not None:
            team.roster.append(
                RosterMember(
                    id=mapping["user_id"],
                    discord_full_name=discord_full_name(
                        mapping["discord_name"], mapping["discord_discriminator"]
                    ),
                    is_owner=mapping["is_owner"],
                )
            )

    return list(teams.values())


async def get_teams_with_roster(calendar_event_id: CalendarEventId) -> list[TournamentTeamWithRoster]:
    return await _get_teams_with_roster(
        "t.calendar_event_id = :calendar_event_id", {"calendar_event_id": calendar_event_id}
    )


async def get_team_by_invite_code(invite_code: str) -> TournamentTeamWithRoster | None:
    teams = await _get_teams_with_roster("t.invite_code = :invite_code", {"invite_code": invite_code})
    return teams[0] if len(teams) > 0 else None


async def _lock_calendar_event(calendar_event_id: CalendarEventId) -> None:
    await database.fetch_val(
        "SELECT id FROM calendar_events WHERE id = :calendar_event_id FOR UPDATE",
        values={"calendar_event_id": calendar_event_id},
    )


async def _is_registered_for_event(calendar_event_id: CalendarEventId, user_id: UserId) -> bool:
    registered = await database.fetch_val(
        """
        SELECT EXISTS (
            SELECT 1
            FROM tournament_team_members m
            JOIN tournament_teams t ON t.id = m.tournament_team_id
            WHERE t.calendar_event_id = :calendar_event_id
              AND m.user_id = :user_id
        )
        """,
        values={"calendar_event_id": calendar_event_id, "user_id": user_id},
    )
    return bool(registered)


async def create_team(calendar_event_id: CalendarEventId, owner_id: UserId) -> TournamentTeam:
    """
    Create a team and its owner membership in one transaction.

    Either both rows exist afterwards or neither does. Registrations for the event
    are serialized on the calendar event row, so a user already on a team gets
    ``AlreadyRegistered``. A clash on the generated invite code raises
    ``InviteCodeCollision``. In both cases nothing is written.
    """
    async with database.transaction():
        await _lock_calendar_event(calendar_event_id)
        if await _is_registered_for_event(calendar_event_id, owner_id):
            raise AlreadyRegistered("User is already registered for this event")

        with check_unique_violation({UniqueIndex.tournament_teams_invite_code_key}):
            result = await database.fetch_one(
                """
                INSERT INTO tournament_teams (calendar_event_id, invite_code, created)
                VALUES (:calendar_event_id, :invite_code, :created)
                RETURNING *
                """,
                values={
                    "calendar_event_id": calendar_event_id,
                    "invite_code": generate_invite_code(),
                    "created": datetime_utc.now(),
                },
            )
        if result is None:
            raise ValueError("Could not create tournament team")
        team = TournamentTeam.model_validate(dict(result._mapping))

        await database.execute(
            """
            INSERT INTO tournament_team_members (tournament_team_id, user_id, is_owner, created)
            VALUES (:tournament_team_id, :user_id, TRUE, :created)
            """,
            values={
                "tournament_team_id": team.id,
                "user_id": owner_id,
                "created": datetime_utc.now(),
            },
        )

    logger.info(f"Created tournament team {team.id} for event {calendar_event_id} by user {owner_id}")
    return team


async def sql_delete_team(team_id: TournamentTeamId) -> None:
    async with database.transaction():
        await database.execute(
            "DELETE FROM tournament_team_members WHERE tournament_team_id = :team_id",
            values={"team_id": team_id},
        )
        await database.execute(
            "DELETE FROM tournament_teams WHERE id = :team_id",
            values={"team_id": team_id},
        )

    logger.info(f"Deleted tournament team {team_id}")


async def sql_leave_team(team_id: TournamentTeamId, user_id: UserId) -> bool:
    removed_id = await database.fetch_val(
        """
        DELETE FROM tournament_team_members
        WHERE tournament_team_id = :team_id
          AND user_id = :user_id
          AND is_owner IS FALSE
        RETURNING id
        """,
        values={"team_id": team_id, "user_id": user_id},
    )
    return removed_id is not None


async def sql_join_team(team: TournamentTeam, user_id: UserId) -> None:
    """Add a member, re-checking registration and roster size under the event lock."""
    async with database.transaction():
        await _lock_calendar_event(team.calendar_event_id)
        if await _is_registered_for_event(team.calendar_event_id, user_id):
            raise AlreadyRegistered("User is already registered for this event")

        roster_size = await database.fetch_val(
            "SELECT count(*) FROM tournament_team_members WHERE tournament_team_id = :team_id",
            values={"team_id": team.id},
        )
        if roster_size >= TEAM_FULL_ROSTER_SIZE:
            raise TeamRosterFull(f"Team {team.id} already has {roster_size} members")

        await database.execute(
            """
            INSERT INTO tournament_team_members (tournament_team_id, user_id, is_owner, created)
            VALUES (:team_id, :user_id, FALSE, :created)
            """,
            values={"team_id": team.id, "user_id": user_id, "created": datetime_utc.now()},
        )

    logger.info(f"User {user_id} joined tournament team {team.id}")
