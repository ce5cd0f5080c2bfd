from heliclockter import datetime_utc
from pydantic import BaseModel

from arena.models.db.account import UserAccountType
from arena.models.db.shared import BaseModelORM
from arena.utils.id_types import UserId


def discord_full_name(discord_name: str, discord_discriminator: str | None) -> str:
    if discord_discriminator is None or discord_discriminator in ("", "0"):
        return discord_name
    return f"{discord_name}#{discord_discriminator}"


class UserBase(BaseModelORM):
    name: str
    discord_name: str
    discord_discriminator: str | None = None
    created: datetime_utc
    account_type: UserAccountType = UserAccountType.REGULAR

    @property
    def discord_full_name(self) -> str:
        return discord_full_name(self.discord_name, self.discord_discriminator)


class UserInsertable(UserBase):
    pass


class UserPublic(UserBase):
    id: UserId


class UserIdentity(BaseModel):
    """A user as shown in pickers and rosters: identity plus display name only."""

    id: UserId
    discord_full_name: str
