from heliclockter import datetime_utc

from arena.logic.permissions import can_edit_badge_managers, can_edit_badge_owners, is_admin
from arena.models.db.account import UserAccountType
from arena.models.db.badge import BadgeManager
from arena.models.db.user import UserPublic
from arena.utils.id_types import UserId


def _build_user(user_id: int, account_type: UserAccountType = UserAccountType.REGULAR) -> UserPublic:
    return UserPublic(
        id=UserId(user_id),
        name=f"User {user_id}",
        discord_name=f"user{user_id}",
        created=datetime_utc.now(),
        account_type=account_type,
    )


MANAGERS = [BadgeManager(id=UserId(2), discord_full_name="user2")]


def test_is_admin() -> None:
    assert is_admin(_build_user(1, UserAccountType.ADMIN)) is True
    assert is_admin(_build_user(1)) is False
    assert is_admin(None) is False


def test_only_admins_can_edit_badge_managers() -> None:
    assert can_edit_badge_managers(_build_user(1, UserAccountType.ADMIN)) is True
    assert can_edit_badge_managers(_build_user(2)) is False
    assert can_edit_badge_managers(None) is False


def test_admins_and_managers_can_edit_badge_owners() -> None:
    assert can_edit_badge_owners(_build_user(1, UserAccountType.ADMIN), MANAGERS) is True
    assert can_edit_badge_owners(_build_user(1, UserAccountType.ADMIN), []) is True
    assert can_edit_badge_owners(_build_user(2), MANAGERS) is True
    assert can_edit_badge_owners(_build_user(3), MANAGERS) is False
    assert can_edit_badge_owners(None, MANAGERS) is False
