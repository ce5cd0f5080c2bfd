from typing import NewType

UserId = NewType("UserId", int)
BadgeId = NewType("BadgeId", int)
BadgeManagerId = NewType("BadgeManagerId", int)
BadgeOwnerId = NewType("BadgeOwnerId", int)
CalendarEventId = NewType("CalendarEventId", int)
TournamentTeamId = NewType("TournamentTeamId", int)
TournamentTeamMemberId = NewType("TournamentTeamMemberId", int)
