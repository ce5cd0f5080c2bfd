from heliclockter import datetime_utc

from arena.database import database
from arena.models.db.tournament_team import CalendarEvent
from arena.utils.id_types import CalendarEventId, UserId


async def get_calendar_event_by_id(calendar_event_id: CalendarEventId) -> CalendarEvent | None:
    query = """
        SELECT *
        FROM calendar_events
        WHERE id = :calendar_event_id
        """
    result = await database.fetch_one(query=query, values={"calendar_event_id": calendar_event_id})
    return CalendarEvent.model_validate(dict(result._mapping)) if result is not None else None


async def sql_create_calendar_event(
    name: str, start_time: datetime_utc, author_id: UserId | None
) -> CalendarEvent:
    query = """
        INSERT INTO calendar_events (name, start_time, author_id, created)
        VALUES (:name, :start_time, :author_id, :created)
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={
            "name": name,
            "start_time": start_time,
            "author_id": author_id,
            "created": datetime_utc.now(),
        },
    )
    if result is None:
        raise ValueError("Could not create calendar event")

    return CalendarEvent.model_validate(dict(result._mapping))
