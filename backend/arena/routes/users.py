from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from arena.config import config
from arena.logic.permissions import is_admin
from arena.models.db.account import UserAccountType
from arena.models.db.shared import BaseModelORM
from arena.models.db.user import UserIdentity, UserPublic
from arena.routes.auth import user_authenticated
from arena.routes.models import DataResponse, SuccessResponse, UserPublicResponse
from arena.sql.users import get_user_by_id, get_users, update_user_account_type
from arena.utils.id_types import UserId

router = APIRouter(prefix=config.api_prefix)


class UserAccountTypeToUpdate(BaseModelORM):
    account_type: UserAccountType


class UserIdentitiesResponse(DataResponse[list[UserIdentity]]):
    pass


@router.get("/users", response_model=UserIdentitiesResponse)
async def list_users(_: UserPublic = Depends(user_authenticated)) -> UserIdentitiesResponse:
    return UserIdentitiesResponse(
        data=[
            UserIdentity(id=user.id, discord_full_name=user.discord_full_name)
            for user in await get_users()
        ]
    )


@router.get("/users/me", response_model=UserPublicResponse)
async def get_me(user_public: UserPublic = Depends(user_authenticated)) -> UserPublicResponse:
    return UserPublicResponse(data=user_public)


@router.put("/users/{user_id}/account_type", response_model=SuccessResponse)
async def put_user_account_type(
    user_id: UserId,
    user_to_update: UserAccountTypeToUpdate,
    user_public: UserPublic = Depends(user_authenticated),
) -> SuccessResponse:
    if not is_admin(user_public):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Admin access required")
    if await get_user_by_id(user_id) is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")

    await update_user_account_type(user_id, user_to_update.account_type)
    return SuccessResponse()
