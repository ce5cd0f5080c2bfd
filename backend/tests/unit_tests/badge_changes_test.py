from arena.logic.badges.changes import (
    count_manager_changes,
    count_owner_changes,
    submit_button_text,
    summarize_changes,
)
from arena.logic.badges.count_list import encode_owner_counts
from arena.utils.id_types import UserId


def test_count_manager_changes_counts_additions_and_removals() -> None:
    original = [UserId(1), UserId(2)]

    assert count_manager_changes(original, [UserId(1), UserId(2)]) == 0
    assert count_manager_changes(original, [UserId(1), UserId(2), UserId(3)]) == 1
    assert count_manager_changes(original, [UserId(1)]) == 1
    assert count_manager_changes(original, [UserId(3)]) == 3
    assert count_manager_changes([], []) == 0


def test_count_manager_changes_ignores_order() -> None:
    assert count_manager_changes([UserId(1), UserId(2)], [UserId(2), UserId(1)]) == 0


def test_count_owner_changes_counts_new_and_modified_owners() -> None:
    original = [(UserId(1), 2), (UserId(2), 1)]

    assert count_owner_changes(original, [(UserId(1), 2), (UserId(2), 1)]) == 0
    assert count_owner_changes(original, [(UserId(1), 3), (UserId(2), 1)]) == 1
    assert count_owner_changes(original, [(UserId(1), 2), (UserId(2), 1), (UserId(3), 1)]) == 1
    assert count_owner_changes(original, [(UserId(1), 0), (UserId(2), 5)]) == 2


def test_count_owner_changes_only_scans_working_roster() -> None:
    # An owner missing from the working roster is not a change, a zero count is.
    original = [(UserId(1), 2), (UserId(2), 1)]

    assert count_owner_changes(original, [(UserId(1), 2)]) == 0
    assert count_owner_changes(original, []) == 0
    assert count_owner_changes(original, [(UserId(1), 2), (UserId(2), 0)]) == 1


def test_submit_button_text() -> None:
    assert submit_button_text(0) == "Submit"
    assert submit_button_text(1) == "Submit 1 change"
    assert submit_button_text(2) == "Submit 2 changes"
    assert submit_button_text(17) == "Submit 17 changes"


def test_summarize_changes_disables_submit_without_changes() -> None:
    no_changes = summarize_changes(0)
    assert no_changes.amount == 0
    assert no_changes.label == "Submit"
    assert no_changes.submit_enabled is False

    some_changes = summarize_changes(3)
    assert some_changes.label == "Submit 3 changes"
    assert some_changes.submit_enabled is True


def test_replacing_a_manager_counts_as_two_changes() -> None:
    amount = count_manager_changes([UserId(1), UserId(2)], [UserId(2), UserId(3)])

    assert amount == 2
    assert submit_button_text(amount) == "Submit 2 changes"


def test_adding_an_owner_with_count_two_counts_as_one_change() -> None:
    original = [(UserId(1), 3)]
    working = [(UserId(1), 3), (UserId(2), 2)]

    assert encode_owner_counts(working) == [1, 1, 1, 2, 2]
    assert count_owner_changes(original, working) == 1
