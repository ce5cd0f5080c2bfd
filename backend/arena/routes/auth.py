from typing import Any

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from heliclockter import datetime_utc, timedelta
from jose import JWTError, jwt
from pydantic import BaseModel
from starlette import status

from arena.config import config
from arena.models.db.user import UserPublic
from arena.sql.users import get_user_by_id
from arena.utils.id_types import UserId

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = config.access_token_expire_minutes

bearer_scheme = HTTPBearer(auto_error=False)


class Token(BaseModel):
    access_token: str
    token_type: str
    user_id: UserId


def create_access_token(data: dict[str, Any], expires_delta: timedelta) -> str:
    to_encode = data.copy()
    expire = datetime_utc.now() + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.jwt_secret, algorithm=ALGORITHM)


def create_access_token_for_user(user_id: UserId) -> Token:
    access_token = create_access_token(
        data={"sub": str(user_id)},
        expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(access_token=access_token, token_type="bearer", user_id=user_id)


async def check_jwt_and_get_user(token: str) -> UserPublic | None:
    try:
        payload = jwt.decode(token, config.jwt_secret, algorithms=[ALGORITHM])
    except JWTError:
        return None

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        return None

    return await get_user_by_id(UserId(int(subject)))


async def user_authenticated_or_anonymous(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserPublic | None:
    if credentials is None:
        return None
    return await check_jwt_and_get_user(credentials.credentials)


async def user_authenticated(
    user: UserPublic | None = Depends(user_authenticated_or_anonymous),
) -> UserPublic:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
