import json
from functools import reduce

from pydantic import TypeAdapter

from arena.logic.badges.drafts import (
    ManagerAdded,
    ManagerRemoved,
    ManagersDraft,
    ManagersDraftEvent,
    OwnerAdded,
    OwnerCountChanged,
    OwnersDraft,
    reduce_managers_draft,
    reduce_owners_draft,
    user_ids_to_omit,
)
from arena.models.db.badge import BadgeManager, BadgeOwner
from arena.utils.id_types import UserId

COMMITTED_MANAGERS = [
    BadgeManager(id=UserId(1), discord_full_name="alice"),
    BadgeManager(id=UserId(2), discord_full_name="bob#1234"),
]
COMMITTED_OWNERS = [
    BadgeOwner(id=UserId(1), discord_full_name="alice", count=3),
    BadgeOwner(id=UserId(3), discord_full_name="carol", count=1),
]


def test_managers_draft_starts_from_committed_roster() -> None:
    draft = ManagersDraft.from_committed(COMMITTED_MANAGERS)

    assert draft.user_ids == [1, 2]
    assert draft.amount_of_changes(COMMITTED_MANAGERS) == 0
    assert json.loads(draft.to_form_value()) == [1, 2]


def test_reduce_managers_draft_add_and_remove() -> None:
    events = [
        ManagerAdded(user_id=UserId(5), discord_full_name="eve"),
        ManagerRemoved(user_id=UserId(1)),
    ]

    draft = reduce(reduce_managers_draft, events, ManagersDraft.from_committed(COMMITTED_MANAGERS))

    assert draft.user_ids == [2, 5]
    assert draft.amount_of_changes(COMMITTED_MANAGERS) == 2
    assert json.loads(draft.to_form_value()) == [2, 5]


def test_reduce_managers_draft_adding_existing_manager_is_a_noop() -> None:
    initial = ManagersDraft.from_committed(COMMITTED_MANAGERS)

    draft = reduce_managers_draft(initial, ManagerAdded(user_id=UserId(2), discord_full_name="bob"))

    assert draft == initial


def test_reduce_managers_draft_remove_then_readd_has_no_changes() -> None:
    events = [
        ManagerRemoved(user_id=UserId(2)),
        ManagerAdded(user_id=UserId(2), discord_full_name="bob#1234"),
    ]

    draft = reduce(reduce_managers_draft, events, ManagersDraft.from_committed(COMMITTED_MANAGERS))

    assert draft.amount_of_changes(COMMITTED_MANAGERS) == 0


def test_reduce_managers_draft_does_not_mutate_previous_draft() -> None:
    initial = ManagersDraft.from_committed(COMMITTED_MANAGERS)

    reduce_managers_draft(initial, ManagerRemoved(user_id=UserId(1)))

    assert initial.user_ids == [1, 2]


def test_reduce_owners_draft_new_owner_starts_with_count_one() -> None:
    draft = reduce_owners_draft(
        OwnersDraft.from_committed(COMMITTED_OWNERS),
        OwnerAdded(user_id=UserId(4), discord_full_name="dave"),
    )

    assert [(owner.id, owner.count) for owner in draft.owners] == [(1, 3), (3, 1), (4, 1)]
    assert draft.amount_of_changes(COMMITTED_OWNERS) == 1
    assert json.loads(draft.to_form_value()) == [1, 1, 1, 3, 4]


def test_reduce_owners_draft_count_changes_are_clamped() -> None:
    events = [
        OwnerCountChanged(user_id=UserId(1), count=250),
        OwnerCountChanged(user_id=UserId(3), count=-2),
    ]

    draft = reduce(reduce_owners_draft, events, OwnersDraft.from_committed(COMMITTED_OWNERS))

    assert [(owner.id, owner.count) for owner in draft.owners] == [(1, 100), (3, 0)]
    assert draft.amount_of_changes(COMMITTED_OWNERS) == 2
    assert json.loads(draft.to_form_value()) == [1] * 100


def test_reduce_owners_draft_count_change_for_unknown_owner_is_ignored() -> None:
    initial = OwnersDraft.from_committed(COMMITTED_OWNERS)

    draft = reduce_owners_draft(initial, OwnerCountChanged(user_id=UserId(99), count=4))

    assert draft == initial


def test_user_ids_to_omit_lists_everyone_in_draft() -> None:
    assert user_ids_to_omit(ManagersDraft.from_committed(COMMITTED_MANAGERS)) == {1, 2}
    assert user_ids_to_omit(OwnersDraft.from_committed(COMMITTED_OWNERS)) == {1, 3}
    assert user_ids_to_omit(ManagersDraft()) == set()


def test_draft_events_are_parsed_by_type() -> None:
    adapter = TypeAdapter(list[ManagersDraftEvent])

    events = adapter.validate_python(
        [
            {"type": "MANAGER_ADDED", "user_id": 5, "discord_full_name": "eve"},
            {"type": "MANAGER_REMOVED", "user_id": 1},
        ]
    )

    assert isinstance(events[0], ManagerAdded)
    assert isinstance(events[1], ManagerRemoved)
