from heliclockter import datetime_utc

from arena.logic.registration import (
    RegistrationAction,
    RegistrationStatus,
    build_invite_link,
    find_own_team,
    get_registration_header,
)
from arena.models.db.account import UserAccountType
from arena.models.db.tournament_team import RosterMember, TournamentTeamWithRoster
from arena.models.db.user import UserPublic
from arena.utils.id_types import CalendarEventId, TournamentTeamId, UserId

SITE_URL = "https://arena.example.com/"


def _build_user(user_id: int) -> UserPublic:
    return UserPublic(
        id=UserId(user_id),
        name=f"User {user_id}",
        discord_name=f"user{user_id}",
        created=datetime_utc.now(),
        account_type=UserAccountType.REGULAR,
    )


def _build_team(team_id: int, owner_id: int, member_ids: list[int]) -> TournamentTeamWithRoster:
    return TournamentTeamWithRoster(
        id=TournamentTeamId(team_id),
        calendar_event_id=CalendarEventId(1),
        invite_code=f"code{team_id:06d}",
        created=datetime_utc.now(),
        roster=[
            RosterMember(id=UserId(owner_id), discord_full_name=f"user{owner_id}", is_owner=True),
            *[
                RosterMember(id=UserId(member_id), discord_full_name=f"user{member_id}", is_owner=False)
                for member_id in member_ids
            ],
        ],
    )


TEAMS = [_build_team(1, 10, [11]), _build_team(2, 20, [21, 22, 23])]


def test_anonymous_user_gets_no_header() -> None:
    assert get_registration_header(None, TEAMS, SITE_URL) is None


def test_unregistered_user_can_create_a_team() -> None:
    header = get_registration_header(_build_user(30), TEAMS, SITE_URL)

    assert header is not None
    assert header.status is RegistrationStatus.NOT_REGISTERED
    assert header.action is RegistrationAction.CREATE
    assert header.invite_link is None
    assert header.roster == []


def test_owner_of_incomplete_team_can_delete_it() -> None:
    header = get_registration_header(_build_user(10), TEAMS, SITE_URL)

    assert header is not None
    assert header.status is RegistrationStatus.INCOMPLETE
    assert header.title == "Add players to complete registration"
    assert header.action is RegistrationAction.DELETE
    assert header.invite_link == "https://arena.example.com/play/join?code=code000001"
    assert [member.id for member in header.roster] == [10, 11]


def test_member_of_full_team_can_leave_it() -> None:
    header = get_registration_header(_build_user(22), TEAMS, SITE_URL)

    assert header is not None
    assert header.status is RegistrationStatus.FULLY_REGISTERED
    assert header.title == "Team fully registered"
    assert header.action is RegistrationAction.LEAVE


def test_find_own_team() -> None:
    own_team = find_own_team(_build_user(11), TEAMS)

    assert own_team is not None
    assert own_team.id == 1
    assert own_team.owner_id == 10
    assert find_own_team(_build_user(99), TEAMS) is None


def test_build_invite_link_without_trailing_slash() -> None:
    assert build_invite_link("http://localhost:3000", "abc") == "http://localhost:3000/play/join?code=abc"
