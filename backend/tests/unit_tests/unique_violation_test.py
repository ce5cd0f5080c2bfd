import pytest
from asyncpg.exceptions import UniqueViolationError
from starlette.exceptions import HTTPException

from arena.utils.errors import InviteCodeCollision, UniqueIndex, check_unique_violation
from arena.utils.security import INVITE_CODE_ALPHABET, generate_invite_code


def _unique_violation(constraint_name: str) -> UniqueViolationError:
    exc = UniqueViolationError("duplicate key value violates unique constraint")
    exc.constraint_name = constraint_name
    return exc


def test_expected_violation_becomes_bad_request() -> None:
    with pytest.raises(HTTPException) as exc_info:
        with check_unique_violation({UniqueIndex.badge_managers_badge_id_user_id_key}):
            raise _unique_violation("badge_managers_badge_id_user_id_key")

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "This user is already a manager of this badge"


def test_invite_code_violation_becomes_collision() -> None:
    with pytest.raises(InviteCodeCollision):
        with check_unique_violation({UniqueIndex.tournament_teams_invite_code_key}):
            raise _unique_violation("tournament_teams_invite_code_key")


def test_unexpected_violation_is_reraised() -> None:
    with pytest.raises(UniqueViolationError):
        with check_unique_violation({UniqueIndex.tournament_teams_invite_code_key}):
            raise _unique_violation("badge_owners_badge_id_user_id_key")


def test_generate_invite_code() -> None:
    codes = {generate_invite_code() for _ in range(50)}

    assert len(codes) == 50
    for code in codes:
        assert len(code) == 10
        assert set(code) <= set(INVITE_CODE_ALPHABET)
    assert len(generate_invite_code(4)) == 4


@pytest.mark.parametrize("constraint_name", ["users_pkey", None])
def test_unknown_or_missing_constraint_is_reraised(constraint_name: str | None) -> None:
    exc = UniqueViolationError("duplicate key value violates unique constraint")
    if constraint_name is not None:
        exc.constraint_name = constraint_name

    with pytest.raises(UniqueViolationError):
        with check_unique_violation(set(UniqueIndex)):
            raise exc
