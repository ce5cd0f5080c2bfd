from collections.abc import Iterator
from contextlib import contextmanager
from enum import auto

from asyncpg.exceptions import UniqueViolationError
from fastapi import HTTPException
from starlette import status

from arena.utils.types import EnumAutoStr


class UniqueIndex(EnumAutoStr):
    badge_managers_badge_id_user_id_key = auto()
    badge_owners_badge_id_user_id_key = auto()
    tournament_teams_invite_code_key = auto()
    tournament_team_members_tournament_team_id_user_id_key = auto()


unique_index_violation_error_lookup = {
    UniqueIndex.badge_managers_badge_id_user_id_key: "This user is already a manager of this badge",
    UniqueIndex.badge_owners_badge_id_user_id_key: "This user is already an owner of this badge",
    UniqueIndex.tournament_teams_invite_code_key: "Generated invite code is already in use",
    UniqueIndex.tournament_team_members_tournament_team_id_user_id_key: (
        "This user is already a member of this team"
    ),
}


class OwnerCountOutOfRange(ValueError):
    def __init__(self, user_id: int, count: int, maximum: int) -> None:
        super().__init__(f"Owner {user_id} has count {count}, expected a value between 0 and {maximum}")
        self.user_id = user_id
        self.count = count
        self.maximum = maximum


class InviteCodeCollision(Exception):
    pass


class AlreadyRegistered(Exception):
    pass


class TeamRosterFull(Exception):
    pass


@contextmanager
def check_unique_violation(expected_violations: set[UniqueIndex]) -> Iterator[None]:
    try:
        yield
    except UniqueViolationError as exc:
        constraint_name = exc.as_dict().get("constraint_name")
        if constraint_name not in UniqueIndex.__members__:
            raise

        violation = UniqueIndex(constraint_name)
        if violation not in expected_violations:
            raise

        if violation is UniqueIndex.tournament_teams_invite_code_key:
            raise InviteCodeCollision(unique_index_violation_error_lookup[violation]) from exc

        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, unique_index_violation_error_lookup[violation]
        ) from exc
