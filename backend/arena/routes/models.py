from pydantic import BaseModel

from arena.logic.registration import RegistrationHeader
from arena.models.badges import BadgeEditPreview, BadgeEditView
from arena.models.db.tournament_team import TournamentTeam, TournamentTeamWithRoster
from arena.models.db.user import UserPublic


class SuccessResponse(BaseModel):
    success: bool = True


class DataResponse[DataT](BaseModel):
    data: DataT


class UserPublicResponse(DataResponse[UserPublic]):
    pass


class BadgeEditViewResponse(DataResponse[BadgeEditView]):
    pass


class BadgeEditPreviewResponse(DataResponse[BadgeEditPreview]):
    pass


class TeamsWithRosterResponse(DataResponse[list[TournamentTeamWithRoster]]):
    pass


class SingleTournamentTeamResponse(DataResponse[TournamentTeam]):
    pass


class RegistrationHeaderResponse(DataResponse[RegistrationHeader]):
    pass
