from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from arena.config import config
from arena.logic.registration import find_own_team, get_registration_header
from arena.models.db.tournament_team import CalendarEvent, TournamentTeamJoinBody
from arena.models.db.user import UserPublic
from arena.routes.auth import user_authenticated, user_authenticated_or_anonymous
from arena.routes.models import (
    RegistrationHeaderResponse,
    SingleTournamentTeamResponse,
    SuccessResponse,
    TeamsWithRosterResponse,
)
from arena.routes.util import calendar_event_dependency
from arena.sql.tournament_teams import (
    create_team,
    get_team_by_invite_code,
    get_teams_with_roster,
    sql_delete_team,
    sql_join_team,
    sql_leave_team,
)
from arena.utils.errors import (
    AlreadyRegistered,
    InviteCodeCollision,
    TeamRosterFull,
    UniqueIndex,
    check_unique_violation,
)
from arena.utils.logging import logger
from arena.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/calendar_events/{event_id}/teams", response_model=TeamsWithRosterResponse)
async def get_teams(
    _: UserPublic | None = Depends(user_authenticated_or_anonymous),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> TeamsWithRosterResponse:
    return TeamsWithRosterResponse(data=await get_teams_with_roster(event.id))


@router.get(
    "/calendar_events/{event_id}/teams/registration", response_model=RegistrationHeaderResponse
)
async def get_registration(
    user: UserPublic = Depends(user_authenticated),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> RegistrationHeaderResponse:
    teams = await get_teams_with_roster(event.id)
    return RegistrationHeaderResponse(
        data=assert_some(get_registration_header(user, teams, config.site_url))
    )


@router.post("/calendar_events/{event_id}/teams", response_model=SingleTournamentTeamResponse)
async def create_tournament_team(
    user: UserPublic = Depends(user_authenticated),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> SingleTournamentTeamResponse:
    teams = await get_teams_with_roster(event.id)
    if find_own_team(user, teams) is not None:
        raise HTTPException(status.HTTP_409_CONFLICT, "You are already registered for this event")

    try:
        team = await create_team(event.id, user.id)
    except AlreadyRegistered as exc:
        raise HTTPException(
            status.HTTP_409_CONFLICT, "You are already registered for this event"
        ) from exc
    except InviteCodeCollision as exc:
        logger.warning(f"Invite code collision while creating a team for event {event.id}")
        raise HTTPException(status.HTTP_409_CONFLICT, str(exc)) from exc

    return SingleTournamentTeamResponse(data=team)


@router.delete("/calendar_events/{event_id}/teams", response_model=SuccessResponse)
async def delete_tournament_team(
    user: UserPublic = Depends(user_authenticated),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> SuccessResponse:
    own_team = find_own_team(user, await get_teams_with_roster(event.id))
    if own_team is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "You are not registered for this event")
    if own_team.owner_id != user.id:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED, "Only the team owner can delete the registration"
        )

    await sql_delete_team(own_team.id)
    return SuccessResponse()


@router.post("/calendar_events/{event_id}/teams/leave", response_model=SuccessResponse)
async def leave_tournament_team(
    user: UserPublic = Depends(user_authenticated),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> SuccessResponse:
    own_team = find_own_team(user, await get_teams_with_roster(event.id))
    if own_team is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "You are not registered for this event")
    if own_team.owner_id == user.id:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            "The team owner can't leave the team, delete the registration instead",
        )

    if not await sql_leave_team(own_team.id, user.id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "You are not a member of this team")

    return SuccessResponse()


@router.post("/calendar_events/{event_id}/teams/join", response_model=SuccessResponse)
async def join_tournament_team(
    body: TournamentTeamJoinBody,
    user: UserPublic = Depends(user_authenticated),
    event: CalendarEvent = Depends(calendar_event_dependency),
) -> SuccessResponse:
    team = await get_team_by_invite_code(body.invite_code)
    if team is None or team.calendar_event_id != event.id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Invalid invite code")

    if find_own_team(user, await get_teams_with_roster(event.id)) is not None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "You are already registered for this event")
    if team.is_fully_registered:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "This team is already full")

    try:
        with check_unique_violation(
            {UniqueIndex.tournament_team_members_tournament_team_id_user_id_key}
        ):
            await sql_join_team(team, user.id)
    except AlreadyRegistered as exc:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "You are already registered for this event"
        ) from exc
    except TeamRosterFull as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "This team is already full") from exc

    return SuccessResponse()
