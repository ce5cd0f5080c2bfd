from collections.abc import Iterable

from pydantic import BaseModel

from arena.utils.id_types import UserId


class ChangeSummary(BaseModel):
    amount: int
    label: str
    submit_enabled: bool


def count_manager_changes(original: Iterable[UserId], working: Iterable[UserId]) -> int:
    """Number of managers added plus number of managers removed."""
    original_ids = set(original)
    working_ids = set(working)
    return len(working_ids - original_ids) + len(original_ids - working_ids)


def count_owner_changes(
    original: Iterable[tuple[UserId, int]], working: Iterable[tuple[UserId, int]]
) -> int:
    """
    Number of owners in the working roster that are new or whose count differs.

    Only the working roster is scanned: an owner dropped from it entirely is not
    counted. Setting an owner's count to zero is the way a removal shows up here.
    """
    original_counts = dict(original)
    return sum(
        1
        for user_id, count in working
        if user_id not in original_counts or original_counts[user_id] != count
    )


def submit_button_text(amount_of_changes: int) -> str:
    if amount_of_changes == 0:
        return "Submit"
    if amount_of_changes == 1:
        return f"Submit {amount_of_changes} change"

    return f"Submit {amount_of_changes} changes"


def summarize_changes(amount_of_changes: int) -> ChangeSummary:
    return ChangeSummary(
        amount=amount_of_changes,
        label=submit_button_text(amount_of_changes),
        submit_enabled=amount_of_changes != 0,
    )
