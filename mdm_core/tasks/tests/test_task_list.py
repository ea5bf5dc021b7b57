from datetime import timedelta

import pytest
from django.utils import timezone

from mdm_core.tasks.models import Task, TaskStatus

pytestmark = pytest.mark.django_db

URL = "/api/tasks"


def _descriptions(res):
    return sorted(t["description"] for t in res.json()["tasks"])


def test_default_lists_open_tasks_of_the_tenant(physician_client, make_task, other_physician):
    make_task(description="open")
    make_task(description="in progress", status=TaskStatus.IN_PROGRESS)
    make_task(description="done", status=TaskStatus.DONE)
    make_task(description="completed", status=TaskStatus.COMPLETED)
    Task.objects.create(physician=other_physician, description="theirs", department="Lab", patient="X")

    res = physician_client.get(URL)
    assert res.status_code == 200
    assert _descriptions(res) == ["in progress", "open"]
    assert res.json()["totalCount"] == 2


def test_status_all_and_explicit(physician_client, make_task):
    make_task(description="open")
    make_task(description="done", status=TaskStatus.DONE)

    assert _descriptions(physician_client.get(URL + "?status=all")) == ["done", "open"]
    assert _descriptions(physician_client.get(URL + "?status=done")) == ["done"]


def test_overdue_filter(physician_client, make_task):
    now = timezone.now()
    make_task(description="late", due_date=now - timedelta(days=2))
    make_task(description="late but done", due_date=now - timedelta(days=2), status=TaskStatus.DONE)
    make_task(description="future", due_date=now + timedelta(days=2))

    assert _descriptions(physician_client.get(URL + "?overdueOnly=true")) == ["late"]
    assert _descriptions(physician_client.get(URL + "?status=overdue")) == ["late"]


def test_priority_filter(physician_client, make_task):
    now = timezone.now()
    make_task(description="undated")
    make_task(description="tomorrow", due_date=now + timedelta(hours=12))
    make_task(description="this week", due_date=now + timedelta(days=4))
    make_task(description="next month", due_date=now + timedelta(days=30))

    assert _descriptions(physician_client.get(URL + "?priority=high")) == ["tomorrow", "undated"]
    assert _descriptions(physician_client.get(URL + "?priority=medium")) == ["this week"]
    assert _descriptions(physician_client.get(URL + "?priority=low")) == ["next month"]


def test_priority_is_reported_per_task(physician_client, make_task):
    make_task(description="next month", due_date=timezone.now() + timedelta(days=30))
    assert physician_client.get(URL).json()["tasks"][0]["priority"] == "low"


def test_assigned_to_uses_claimed_action(physician_client, make_task):
    make_task(description="mine", actions=["Claimed", "Complete"])
    make_task(description="free")

    assert _descriptions(physician_client.get(URL + "?assignedTo=me")) == ["mine"]
    assert _descriptions(physician_client.get(URL + "?assignedTo=unassigned")) == ["free"]


def test_search_and_department(physician_client, make_task):
    make_task(description="Review MRI", department="Radiology", patient="Jane Doe")
    make_task(description="Sign forms", department="Front Desk", patient="John Roe")

    assert _descriptions(physician_client.get(URL + "?search=roe")) == ["Sign forms"]
    assert _descriptions(physician_client.get(URL + "?dept=Radiology%20Department")) == ["Review MRI"]


def test_sorting_and_paging(physician_client, make_task):
    now = timezone.now()
    for i in range(5):
        make_task(description=f"t{i}", due_date=now + timedelta(days=i + 1))

    res = physician_client.get(URL + "?sortBy=dueDate&sortOrder=desc&page=2&pageSize=2")
    body = res.json()
    assert body["totalCount"] == 5
    assert [t["description"] for t in body["tasks"]] == ["t2", "t1"]


def test_page_size_is_clamped(physician_client, make_task):
    for i in range(3):
        make_task(description=f"t{i}")

    body = physician_client.get(URL + "?pageSize=0").json()
    assert len(body["tasks"]) == 1

    body = physician_client.get(URL + "?pageSize=5000").json()
    assert len(body["tasks"]) == 3


def test_invalid_filters_are_400(physician_client):
    assert physician_client.get(URL + "?priority=urgent").status_code == 400
    assert physician_client.get(URL + "?sortBy=patient").status_code == 400
    assert physician_client.get(URL + "?assignedTo=someone").status_code == 400


def test_staff_sees_physician_tasks(staff_client, make_task):
    make_task(description="shared")
    assert _descriptions(staff_client.get(URL)) == ["shared"]


def test_attorney_forbidden(attorney_client):
    assert attorney_client.get(URL).status_code == 403


def test_patch_updates_task(physician_client, make_task):
    task = make_task()
    res = physician_client.patch(
        f"{URL}/{task.id}", {"status": "Done", "actions": ["Claimed", "Complete"]}, format="json"
    )
    assert res.status_code == 200
    task.refresh_from_db()
    assert task.status == TaskStatus.DONE
    assert task.is_claimed


def test_patch_other_tenant_task_is_404(physician_client, other_physician):
    theirs = Task.objects.create(physician=other_physician, description="x", department="y", patient="z")
    res = physician_client.patch(f"{URL}/{theirs.id}", {"status": "Done"}, format="json")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Task not found"
    theirs.refresh_from_db()
    assert theirs.status == TaskStatus.PENDING


def test_office_pulse_counts(physician_client, make_task, other_physician):
    past = timezone.now() - timedelta(days=1)
    make_task(department="Lab", due_date=past)
    make_task(department="Lab", actions=["Claimed", "Complete"])
    make_task(department="Lab", status=TaskStatus.DONE, due_date=past)
    make_task(department="Billing")
    Task.objects.create(physician=other_physician, description="x", department="Lab", patient="z")

    body = physician_client.get("/api/office-pulse").json()
    assert len(body["tasks"]) == 4

    pulse = body["pulse"]
    rows = {r["department"]: r for r in pulse["depts"]}
    assert rows["Lab"] == {"department": "Lab", "open": 2, "overdue": 1, "unclaimed": 2}
    assert rows["Billing"] == {"department": "Billing", "open": 1, "overdue": 0, "unclaimed": 1}
    assert pulse["labels"] == ["Total Open", "Total Overdue", "Total Unclaimed"]
    assert pulse["vals"] == [3, 1, 3]
