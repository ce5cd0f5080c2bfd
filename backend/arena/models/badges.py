import json
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, Strict, TypeAdapter, field_validator

from arena.logic.badges.changes import ChangeSummary
from arena.logic.badges.drafts import (
    ManagersDraft,
    ManagersDraftEvent,
    OwnersDraft,
    OwnersDraftEvent,
)
from arena.models.db.badge import Badge, BadgeManager, BadgeOwner
from arena.utils.id_types import UserId

StrictUserId = Annotated[UserId, Strict(), Field(gt=0)]


def parse_json_form_value(value: object) -> object:
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except ValueError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc


class EditBadgeManagersAction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: Literal["MANAGERS"] = Field(alias="_action")
    manager_ids: list[StrictUserId] = Field(alias="managerIds")

    @field_validator("manager_ids", mode="before")
    @classmethod
    def parse_manager_ids(cls, value: object) -> object:
        return parse_json_form_value(value)

    @field_validator("manager_ids")
    @classmethod
    def no_duplicates(cls, value: list[UserId]) -> list[UserId]:
        if len(set(value)) != len(value):
            raise ValueError("Manager ids must not contain duplicates")
        return value


class EditBadgeOwnersAction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: Literal["OWNERS"] = Field(alias="_action")
    owner_ids: list[StrictUserId] = Field(alias="ownerIds")

    @field_validator("owner_ids", mode="before")
    @classmethod
    def parse_owner_ids(cls, value: object) -> object:
        return parse_json_form_value(value)


EditBadgeActionVariant = EditBadgeManagersAction | EditBadgeOwnersAction
EditBadgeAction = Annotated[EditBadgeActionVariant, Field(discriminator="action")]
edit_badge_action_adapter: TypeAdapter[EditBadgeActionVariant] = TypeAdapter(EditBadgeAction)


class BadgeEditView(BaseModel):
    badge: Badge
    managers: list[BadgeManager]
    owners: list[BadgeOwner]
    can_edit_managers: bool
    can_edit_owners: bool


class BadgeEditChangesBody(BaseModel):
    manager_events: list[ManagersDraftEvent] = Field(default_factory=list)
    owner_events: list[OwnersDraftEvent] = Field(default_factory=list)


class BadgeEditPreview(BaseModel):
    managers: ManagersDraft
    owners: OwnersDraft
    manager_changes: ChangeSummary
    owner_changes: ChangeSummary
    manager_ids_form_value: str
    owner_ids_form_value: str
    manager_ids_to_omit: list[UserId]
    owner_ids_to_omit: list[UserId]
