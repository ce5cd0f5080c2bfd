from functools import reduce
from typing import assert_never

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from starlette import status

from arena.config import config
from arena.logic.badges.changes import summarize_changes
from arena.logic.badges.drafts import (
    ManagersDraft,
    OwnersDraft,
    reduce_managers_draft,
    reduce_owners_draft,
    user_ids_to_omit,
)
from arena.logic.permissions import can_edit_badge_managers, can_edit_badge_owners
from arena.models.badges import (
    BadgeEditChangesBody,
    BadgeEditPreview,
    BadgeEditView,
    EditBadgeActionVariant,
    EditBadgeManagersAction,
    EditBadgeOwnersAction,
    edit_badge_action_adapter,
)
from arena.models.db.badge import Badge
from arena.models.db.user import UserPublic
from arena.routes.auth import user_authenticated, user_authenticated_or_anonymous
from arena.routes.models import (
    BadgeEditPreviewResponse,
    BadgeEditViewResponse,
    SuccessResponse,
)
from arena.routes.util import badge_dependency
from arena.sql.badges import (
    managers_by_badge_id,
    owners_by_badge_id,
    upsert_many_managers,
    upsert_many_owners,
)
from arena.utils.errors import OwnerCountOutOfRange, UniqueIndex, check_unique_violation
from arena.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


async def parse_edit_badge_action(request: Request) -> EditBadgeActionVariant:
    form = await request.form()
    try:
        return edit_badge_action_adapter.validate_python(dict(form))
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid badge edit payload: {exc.errors(include_url=False)}",
        ) from exc


@router.get("/badges/{badge_id}/edit", response_model=BadgeEditViewResponse)
async def get_badge_edit_view(
    user: UserPublic | None = Depends(user_authenticated_or_anonymous),
    badge: Badge = Depends(badge_dependency),
) -> BadgeEditViewResponse:
    managers = await managers_by_badge_id(badge.id)
    owners = await owners_by_badge_id(badge.id)

    return BadgeEditViewResponse(
        data=BadgeEditView(
            badge=badge,
            managers=managers,
            owners=owners,
            can_edit_managers=can_edit_badge_managers(user),
            can_edit_owners=can_edit_badge_owners(user, managers),
        )
    )


@router.post("/badges/{badge_id}/edit/changes", response_model=BadgeEditPreviewResponse)
async def preview_badge_edit(
    body: BadgeEditChangesBody,
    _: UserPublic = Depends(user_authenticated),
    badge: Badge = Depends(badge_dependency),
) -> BadgeEditPreviewResponse:
    committed_managers = await managers_by_badge_id(badge.id)
    committed_owners = await owners_by_badge_id(badge.id)

    managers_draft = reduce(
        reduce_managers_draft,
        body.manager_events,
        ManagersDraft.from_committed(committed_managers),
    )
    owners_draft = reduce(
        reduce_owners_draft,
        body.owner_events,
        OwnersDraft.from_committed(committed_owners),
    )

    return BadgeEditPreviewResponse(
        data=BadgeEditPreview(
            managers=managers_draft,
            owners=owners_draft,
            manager_changes=summarize_changes(managers_draft.amount_of_changes(committed_managers)),
            owner_changes=summarize_changes(owners_draft.amount_of_changes(committed_owners)),
            manager_ids_form_value=managers_draft.to_form_value(),
            owner_ids_form_value=owners_draft.to_form_value(),
            manager_ids_to_omit=sorted(user_ids_to_omit(managers_draft)),
            owner_ids_to_omit=sorted(user_ids_to_omit(owners_draft)),
        )
    )


@router.post("/badges/{badge_id}/edit", response_model=SuccessResponse)
async def edit_badge(
    data: EditBadgeActionVariant = Depends(parse_edit_badge_action),
    user: UserPublic = Depends(user_authenticated),
    badge: Badge = Depends(badge_dependency),
) -> SuccessResponse:
    match data:
        case EditBadgeManagersAction():
            if not can_edit_badge_managers(user):
                raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Can't edit managers of this badge")

            with check_unique_violation({UniqueIndex.badge_managers_badge_id_user_id_key}):
                await upsert_many_managers(badge.id, data.manager_ids)
        case EditBadgeOwnersAction():
            if not can_edit_badge_owners(user, await managers_by_badge_id(badge.id)):
                raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Can't edit owners of this badge")

            try:
                await upsert_many_owners(badge.id, data.owner_ids)
            except OwnerCountOutOfRange as exc:
                raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc)) from exc
        case _:
            assert_never(data)

    logger.info(f"User {user.id} edited {data.action.lower()} of badge {badge.id}")
    return SuccessResponse()
