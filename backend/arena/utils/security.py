import secrets
import string

from arena.models.db.tournament_team import INVITE_CODE_LENGTH

INVITE_CODE_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_invite_code(length: int = INVITE_CODE_LENGTH) -> str:
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))
