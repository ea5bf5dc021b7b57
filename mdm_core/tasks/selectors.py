# mdm_core/tasks/selectors.py
from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any, Optional

from django.db.models import F, Q, QuerySet
from django.utils import timezone

from mdm_core.tasks.models import CLOSED_STATUSES, Task, TaskAction, TaskStatus

STATUS_ALIASES = {
    "pending": TaskStatus.PENDING,
    "in progress": TaskStatus.IN_PROGRESS,
    "in_progress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
    "completed": TaskStatus.COMPLETED,
    "closed": TaskStatus.CLOSED,
}

SORT_FIELDS = {
    "dueDate": "due_date",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "description": "description",
    "department": "department",
}

PULSE_LABELS = ["Total Open", "Total Overdue", "Total Unclaimed"]

_DEPARTMENT_WORD = re.compile(r"\bdepartment\b", re.IGNORECASE)


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def task_priority(task: Task, now: datetime) -> str:
    """
    high: no due date, overdue, or due within a day
    medium: due within a week
    low: later
    """
    if task.due_date is None:
        return "high"
    remaining = task.due_date - now
    if remaining <= timedelta(days=1):
        return "high"
    if remaining <= timedelta(days=7):
        return "medium"
    return "low"


class TaskSelector:
    @staticmethod
    def get_task(*, physician_id: int, task_id) -> Task:
        return Task.objects.select_related("document").get(id=task_id, physician_id=physician_id)

    @staticmethod
    def tasks_for(*, physician_id: int) -> QuerySet[Task]:
        return Task.objects.filter(physician_id=physician_id)

    @staticmethod
    def _overdue_q(now: datetime) -> Q:
        return Q(due_date__lt=now) & ~Q(status__in=CLOSED_STATUSES)

    @staticmethod
    def _filter_status(qs: QuerySet[Task], raw: str, now: datetime) -> QuerySet[Task]:
        value = raw.strip().lower()
        if not value:
            return qs.exclude(status__in=CLOSED_STATUSES)
        if value == "all":
            return qs
        if value == "overdue":
            return qs.filter(TaskSelector._overdue_q(now))
        if value in STATUS_ALIASES:
            return qs.filter(status=STATUS_ALIASES[value])
        return qs.filter(status__iexact=raw.strip())

    @staticmethod
    def _filter_due_window(qs: QuerySet[Task], window: str, now: datetime) -> QuerySet[Task]:
        start_of_day = timezone.localtime(now).replace(hour=0, minute=0, second=0, microsecond=0)
        if window == "today":
            return qs.filter(due_date__gte=start_of_day, due_date__lt=start_of_day + timedelta(days=1))
        if window == "week":
            return qs.filter(due_date__gte=start_of_day, due_date__lt=start_of_day + timedelta(days=7))
        if window == "month":
            return qs.filter(due_date__gte=start_of_day, due_date__lt=start_of_day + timedelta(days=30))
        raise ValueError("dueDate must be one of: today, week, month")

    @staticmethod
    def _filter_priority(qs: QuerySet[Task], priority: str, now: datetime) -> QuerySet[Task]:
        day, week = now + timedelta(days=1), now + timedelta(days=7)
        if priority == "high":
            return qs.filter(Q(due_date__isnull=True) | Q(due_date__lte=day))
        if priority == "medium":
            return qs.filter(due_date__gt=day, due_date__lte=week)
        if priority == "low":
            return qs.filter(due_date__gt=week)
        raise ValueError("priority must be one of: high, medium, low")

    @staticmethod
    def _filter_claimed(qs: QuerySet[Task], assigned_to: str) -> QuerySet[Task]:
        # JSON containment lookups are not portable; match "Claimed" in Python.
        if assigned_to not in {"me", "unassigned"}:
            raise ValueError("assignedTo must be one of: me, unassigned")
        want_claimed = assigned_to == "me"
        ids = [
            pk
            for pk, actions in qs.values_list("id", "actions")
            if (TaskAction.CLAIMED in (actions or [])) == want_claimed
        ]
        return qs.filter(id__in=ids)

    @staticmethod
    def list_tasks(*, physician_id: int, params: Any, now: Optional[datetime] = None) -> QuerySet[Task]:
        """
        Query params supported:
          - search: description or patient, case-insensitive
          - dept: department contains (the word "Department" is ignored)
          - status: pending|in progress|done|completed|closed|overdue|all
            (absent -> open tasks only)
          - overdueOnly=true
          - assignedTo: me (claimed) | unassigned
          - priority: high|medium|low
          - dueDate: today|week|month
          - sortBy in SORT_FIELDS, sortOrder asc|desc
        Paging (page, pageSize) is left to TaskPagination.
        Raises ValueError for unsupported values.
        """
        now = now or timezone.now()
        qs = TaskSelector.tasks_for(physician_id=physician_id).select_related("document")

        search = (params.get("search") or "").strip()
        if search:
            qs = qs.filter(Q(description__icontains=search) | Q(patient__icontains=search))

        dept = _DEPARTMENT_WORD.sub("", params.get("dept") or "").strip()
        if dept:
            qs = qs.filter(department__icontains=dept)

        qs = TaskSelector._filter_status(qs, params.get("status") or "", now)

        if _truthy(params.get("overdueOnly")):
            qs = qs.filter(TaskSelector._overdue_q(now))

        priority = (params.get("priority") or "").strip().lower()
        if priority:
            qs = TaskSelector._filter_priority(qs, priority, now)

        due_window = (params.get("dueDate") or "").strip().lower()
        if due_window:
            qs = TaskSelector._filter_due_window(qs, due_window, now)

        assigned_to = (params.get("assignedTo") or "").strip().lower()
        if assigned_to:
            qs = TaskSelector._filter_claimed(qs, assigned_to)

        sort_by = params.get("sortBy") or "dueDate"
        if sort_by not in SORT_FIELDS:
            raise ValueError(f"sortBy is invalid. Allowed: {sorted(SORT_FIELDS)}")
        sort_order = (params.get("sortOrder") or "asc").lower()
        if sort_order not in {"asc", "desc"}:
            raise ValueError("sortOrder must be asc or desc")

        field = F(SORT_FIELDS[sort_by])
        ordering = field.desc(nulls_last=True) if sort_order == "desc" else field.asc(nulls_last=True)
        return qs.order_by(ordering, "-created_at")

    @staticmethod
    def office_pulse(*, physician_id: int, now: Optional[datetime] = None) -> tuple[list[Task], dict]:
        """
        Per-department workload for one tenant.
        open = status != Done; overdue = open and due before now;
        unclaimed = actions lack "Claimed".
        """
        now = now or timezone.now()
        tasks = list(TaskSelector.tasks_for(physician_id=physician_id).select_related("document").order_by("department", "-created_at"))
        return tasks, summarize_pulse(tasks, now)


def summarize_pulse(tasks: list[Task], now: datetime) -> dict:
    depts: dict[str, dict[str, Any]] = {}
    for task in tasks:
        row = depts.setdefault(
            task.department,
            {"department": task.department, "open": 0, "overdue": 0, "unclaimed": 0},
        )
        is_open = task.status != TaskStatus.DONE
        if is_open:
            row["open"] += 1
            if task.due_date is not None and task.due_date < now:
                row["overdue"] += 1
        if not task.is_claimed:
            row["unclaimed"] += 1

    rows = list(depts.values())
    vals = [
        sum(r["open"] for r in rows),
        sum(r["overdue"] for r in rows),
        sum(r["unclaimed"] for r in rows),
    ]
    return {"depts": rows, "labels": list(PULSE_LABELS), "vals": vals}
