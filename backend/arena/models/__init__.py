"""Model registration module used by alembic autogeneration."""

from arena.models.db.badge import Badge, BadgeManager, BadgeOwner  # noqa: F401
from arena.models.db.tournament_team import (  # noqa: F401
    CalendarEvent,
    TournamentTeam,
    TournamentTeamMember,
)
from arena.models.db.user import UserPublic  # noqa: F401
