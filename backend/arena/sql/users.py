from arena.database import database
from arena.models.db.account import UserAccountType
from arena.models.db.user import UserInsertable, UserPublic
from arena.schema import users
from arena.utils.id_types import UserId


async def get_user_by_id(user_id: UserId) -> UserPublic | None:
    query = """
        SELECT *
        FROM users
        WHERE id = :user_id
        """
    result = await database.fetch_one(query=query, values={"user_id": user_id})
    return UserPublic.model_validate(dict(result._mapping)) if result is not None else None


async def get_users() -> list[UserPublic]:
    query = """
        SELECT *
        FROM users
        ORDER BY lower(discord_name) ASC
        """
    result = await database.fetch_all(query=query)
    return [UserPublic.model_validate(dict(user._mapping)) for user in result]


async def create_user(user: UserInsertable) -> UserPublic:
    query = """
        INSERT INTO users (name, discord_name, discord_discriminator, created, account_type)
        VALUES (:name, :discord_name, :discord_discriminator, :created, :account_type)
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={
            "name": user.name,
            "discord_name": user.discord_name,
            "discord_discriminator": user.discord_discriminator,
            "created": user.created,
            "account_type": user.account_type.value,
        },
    )
    if result is None:
        raise ValueError("Could not create user")

    return UserPublic.model_validate(dict(result._mapping))


async def update_user_account_type(user_id: UserId, account_type: UserAccountType) -> None:
    await database.execute(
        query=users.update().where(users.c.id == user_id),
        values={"account_type": account_type.value},
    )
