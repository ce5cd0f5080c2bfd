from collections.abc import Iterable

from arena.models.db.account import UserAccountType
from arena.models.db.badge import BadgeManager
from arena.models.db.user import UserPublic


def is_admin(user: UserPublic | None) -> bool:
    return user is not None and user.account_type is UserAccountType.ADMIN


def can_edit_badge_managers(user: UserPublic | None) -> bool:
    return is_admin(user)


def can_edit_badge_owners(user: UserPublic | None, managers: Iterable[BadgeManager]) -> bool:
    if user is None:
        return False
    if is_admin(user):
        return True

    return any(manager.id == user.id for manager in managers)
