from enum import auto

from pydantic import BaseModel

from arena.models.db.tournament_team import RosterMember, TournamentTeamWithRoster
from arena.models.db.user import UserPublic
from arena.utils.types import EnumAutoStr


class RegistrationStatus(EnumAutoStr):
    NOT_REGISTERED = auto()
    INCOMPLETE = auto()
    FULLY_REGISTERED = auto()


class RegistrationAction(EnumAutoStr):
    CREATE = auto()
    DELETE = auto()
    LEAVE = auto()


class RegistrationHeader(BaseModel):
    status: RegistrationStatus
    title: str | None = None
    invite_link: str | None = None
    roster: list[RosterMember] = []
    action: RegistrationAction


def find_own_team(
    user: UserPublic, teams: list[TournamentTeamWithRoster]
) -> TournamentTeamWithRoster | None:
    return next((team for team in teams if team.has_member(user.id)), None)


def build_invite_link(site_url: str, invite_code: str) -> str:
    return f"{site_url.rstrip('/')}/play/join?code={invite_code}"


def get_registration_header(
    user: UserPublic | None, teams: list[TournamentTeamWithRoster], site_url: str
) -> RegistrationHeader | None:
    if user is None:
        return None

    own_team = find_own_team(user, teams)
    if own_team is None:
        return RegistrationHeader(
            status=RegistrationStatus.NOT_REGISTERED, action=RegistrationAction.CREATE
        )

    if own_team.is_fully_registered:
        status = RegistrationStatus.FULLY_REGISTERED
        title = "Team fully registered"
    else:
        status = RegistrationStatus.INCOMPLETE
        title = "Add players to complete registration"

    return RegistrationHeader(
        status=status,
        title=title,
        invite_link=build_invite_link(site_url, own_team.invite_code),
        roster=own_team.roster,
        action=(
            RegistrationAction.DELETE
            if own_team.owner_id == user.id
            else RegistrationAction.LEAVE
        ),
    )
