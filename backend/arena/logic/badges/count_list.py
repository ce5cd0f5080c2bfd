"""
Owner rosters travel as a flat list of user ids where an id is repeated once per
unit of its count, e.g. ``[(7, 3), (9, 1)]`` is sent as ``[7, 7, 7, 9]``.
"""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

from arena.utils.errors import OwnerCountOutOfRange
from arena.utils.id_types import UserId

MAX_OWNER_COUNT = 100


class OwnerCount(NamedTuple):
    user_id: UserId
    count: int


def encode_owner_counts(owners: Iterable[tuple[UserId, int]]) -> list[UserId]:
    return [user_id for user_id, count in owners for _ in range(count)]


def decode_owner_ids(owner_ids: Sequence[UserId]) -> list[OwnerCount]:
    counts: dict[UserId, int] = {}
    for user_id in owner_ids:
        counts[user_id] = counts.get(user_id, 0) + 1

    return [OwnerCount(user_id, count) for user_id, count in counts.items()]


def check_owner_counts_in_range(owners: Iterable[OwnerCount]) -> None:
    for owner in owners:
        if not 0 <= owner.count <= MAX_OWNER_COUNT:
            raise OwnerCountOutOfRange(owner.user_id, owner.count, MAX_OWNER_COUNT)
