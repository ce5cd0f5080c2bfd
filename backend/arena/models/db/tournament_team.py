from typing import Annotated

from heliclockter import datetime_utc
from pydantic import BaseModel, StringConstraints

from arena.models.db.shared import BaseModelORM
from arena.utils.id_types import (
    CalendarEventId,
    TournamentTeamId,
    TournamentTeamMemberId,
    UserId,
)

INVITE_CODE_LENGTH = 10
TEAM_FULL_ROSTER_SIZE = 4


class CalendarEvent(BaseModelORM):
    id: CalendarEventId
    name: str
    start_time: datetime_utc
    author_id: UserId | None = None
    created: datetime_utc


class TournamentTeamInsertable(BaseModelORM):
    calendar_event_id: CalendarEventId
    invite_code: str
    created: datetime_utc


class TournamentTeam(TournamentTeamInsertable):
    id: TournamentTeamId


class TournamentTeamMember(BaseModelORM):
    id: TournamentTeamMemberId
    tournament_team_id: TournamentTeamId
    user_id: UserId
    is_owner: bool
    created: datetime_utc


class RosterMember(BaseModelORM):
    id: UserId
    discord_full_name: str
    is_owner: bool


class TournamentTeamWithRoster(TournamentTeam):
    roster: list[RosterMember]

    @property
    def owner_id(self) -> UserId | None:
        return next((member.id for member in self.roster if member.is_owner), None)

    def has_member(self, user_id: UserId) -> bool:
        return any(member.id == user_id for member in self.roster)

    @property
    def is_fully_registered(self) -> bool:
        return len(self.roster) >= TEAM_FULL_ROSTER_SIZE


class TournamentTeamJoinBody(BaseModel):
    invite_code: Annotated[str, StringConstraints(min_length=1, max_length=64, strip_whitespace=True)]
