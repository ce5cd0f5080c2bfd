from heliclockter import datetime_utc

from arena.models.db.shared import BaseModelORM
from arena.utils.id_types import BadgeId, UserId


class BadgeInsertable(BaseModelORM):
    code: str
    display_name: str
    created: datetime_utc


class Badge(BadgeInsertable):
    id: BadgeId


class BadgeManager(BaseModelORM):
    id: UserId
    discord_full_name: str


class BadgeOwner(BaseModelORM):
    id: UserId
    discord_full_name: str
    count: int
