from enum import auto

from arena.utils.types import EnumAutoStr


class UserAccountType(EnumAutoStr):
    REGULAR = auto()
    ADMIN = auto()
