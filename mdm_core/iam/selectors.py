# mdm_core/iam/selectors.py
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.db.models import QuerySet

from mdm_core.iam.models import Role


def roster_for_physician(*, physician_id: int) -> QuerySet:
    """
    Every account linked to one physician, whatever its role, oldest first.
    """
    User = get_user_model()
    return (
        User.objects.filter(profile__physician_id=physician_id)
        .select_related("profile")
        .order_by("date_joined", "id")
    )


def staff_for_physician(*, physician_id: int) -> QuerySet:
    """
    Staff accounts linked to one physician, oldest first.
    """
    User = get_user_model()
    return (
        User.objects.filter(
            is_active=True,
            profile__physician_id=physician_id,
            profile__role=Role.STAFF,
        )
        .select_related("profile")
        .order_by("date_joined", "id")
    )


COMMON_ASSIGNEES = ("Medical Assistant", "Admin", "Scheduler")


def assignee_options(*, physician_id: int) -> list[str]:
    """
    Assignee labels for task pickers:
    Unclaimed, Physician, one "Assigned: First Last" per staff member, then fixed common roles.
    Duplicates are dropped, first occurrence wins.
    """
    options = ["Unclaimed", "Physician"]
    for user in staff_for_physician(physician_id=physician_id):
        full_name = f"{user.first_name} {user.last_name}".strip() or user.email
        options.append(f"Assigned: {full_name}")
    options.extend(COMMON_ASSIGNEES)
    return list(dict.fromkeys(options))
