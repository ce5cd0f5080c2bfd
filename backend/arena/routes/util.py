from fastapi import HTTPException
from starlette import status

from arena.models.db.badge import Badge
from arena.models.db.tournament_team import CalendarEvent
from arena.sql.badges import get_badge_by_id
from arena.sql.calendar_events import get_calendar_event_by_id
from arena.utils.id_types import BadgeId, CalendarEventId


async def badge_dependency(badge_id: BadgeId) -> Badge:
    badge = await get_badge_by_id(badge_id)
    if badge is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find badge with id {badge_id}",
        )

    return badge


async def calendar_event_dependency(event_id: CalendarEventId) -> CalendarEvent:
    event = await get_calendar_event_by_id(event_id)
    if event is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find calendar event with id {event_id}",
        )

    return event
