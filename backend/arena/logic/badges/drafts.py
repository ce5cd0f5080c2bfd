"""
Editing sessions for a badge's managers and owners.

A draft is an immutable value. Every edit is an event, and the reducers return the
next draft. The committed rosters are only read to build the initial draft and to
count changes, never written to.
"""

import json
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field

from arena.logic.badges.changes import count_manager_changes, count_owner_changes
from arena.logic.badges.count_list import MAX_OWNER_COUNT, encode_owner_counts
from arena.models.db.badge import BadgeManager, BadgeOwner
from arena.utils.id_types import UserId


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DraftManager(_FrozenModel):
    id: UserId
    discord_full_name: str


class DraftOwner(_FrozenModel):
    id: UserId
    discord_full_name: str
    count: int


class ManagerAdded(_FrozenModel):
    type: Literal["MANAGER_ADDED"] = "MANAGER_ADDED"
    user_id: UserId
    discord_full_name: str


class ManagerRemoved(_FrozenModel):
    type: Literal["MANAGER_REMOVED"] = "MANAGER_REMOVED"
    user_id: UserId


class OwnerAdded(_FrozenModel):
    type: Literal["OWNER_ADDED"] = "OWNER_ADDED"
    user_id: UserId
    discord_full_name: str


class OwnerCountChanged(_FrozenModel):
    type: Literal["OWNER_COUNT_CHANGED"] = "OWNER_COUNT_CHANGED"
    user_id: UserId
    count: int


ManagersDraftEvent = Annotated[ManagerAdded | ManagerRemoved, Field(discriminator="type")]
OwnersDraftEvent = Annotated[OwnerAdded | OwnerCountChanged, Field(discriminator="type")]


class ManagersDraft(_FrozenModel):
    managers: tuple[DraftManager, ...] = ()

    @classmethod
    def from_committed(cls, managers: list[BadgeManager]) -> "ManagersDraft":
        return cls(
            managers=tuple(
                DraftManager(id=manager.id, discord_full_name=manager.discord_full_name)
                for manager in managers
            )
        )

    @property
    def user_ids(self) -> list[UserId]:
        return [manager.id for manager in self.managers]

    def amount_of_changes(self, committed: list[BadgeManager]) -> int:
        return count_manager_changes((manager.id for manager in committed), self.user_ids)

    def to_form_value(self) -> str:
        return json.dumps(self.user_ids)


class OwnersDraft(_FrozenModel):
    owners: tuple[DraftOwner, ...] = ()

    @classmethod
    def from_committed(cls, owners: list[BadgeOwner]) -> "OwnersDraft":
        return cls(
            owners=tuple(
                DraftOwner(id=owner.id, discord_full_name=owner.discord_full_name, count=owner.count)
                for owner in owners
            )
        )

    @property
    def user_ids(self) -> list[UserId]:
        return [owner.id for owner in self.owners]

    def amount_of_changes(self, committed: list[BadgeOwner]) -> int:
        return count_owner_changes(
            ((owner.id, owner.count) for owner in committed),
            ((owner.id, owner.count) for owner in self.owners),
        )

    def to_form_value(self) -> str:
        return json.dumps(encode_owner_counts((owner.id, owner.count) for owner in self.owners))


def clamp_owner_count(count: int) -> int:
    return max(0, min(MAX_OWNER_COUNT, count))


def reduce_managers_draft(draft: ManagersDraft, event: ManagersDraftEvent) -> ManagersDraft:
    match event:
        case ManagerAdded(user_id=user_id, discord_full_name=discord_full_name):
            if user_id in draft.user_ids:
                return draft
            return ManagersDraft(
                managers=(
                    *draft.managers,
                    DraftManager(id=user_id, discord_full_name=discord_full_name),
                )
            )
        case ManagerRemoved(user_id=user_id):
            return ManagersDraft(
                managers=tuple(manager for manager in draft.managers if manager.id != user_id)
            )
        case _:
            assert_never(event)


def reduce_owners_draft(draft: OwnersDraft, event: OwnersDraftEvent) -> OwnersDraft:
    match event:
        case OwnerAdded(user_id=user_id, discord_full_name=discord_full_name):
            if user_id in draft.user_ids:
                return draft
            return OwnersDraft(
                owners=(
                    *draft.owners,
                    DraftOwner(id=user_id, discord_full_name=discord_full_name, count=1),
                )
            )
        case OwnerCountChanged(user_id=user_id, count=count):
            return OwnersDraft(
                owners=tuple(
                    owner.model_copy(update={"count": clamp_owner_count(count)})
                    if owner.id == user_id
                    else owner
                    for owner in draft.owners
                )
            )
        case _:
            assert_never(event)


def user_ids_to_omit(draft: ManagersDraft | OwnersDraft) -> set[UserId]:
    return set(draft.user_ids)
