import pytest

from mdm_core.iam.models import Role, UserProfile

pytestmark = pytest.mark.django_db


def test_roster_leaves_out_other_physicians_accounts(physician_client, staff, other_physician):
    from mdm_core.iam.services.accounts import AccountService

    AccountService.create_staff(
        physician_id=other_physician.id,
        email="foreman@example.com",
        password="pass12345",
        first_name="Eric",
        last_name="Foreman",
    )

    res = physician_client.get("/api/staff")
    assert res.status_code == 200

    staff_rows = res.json()["staff"]
    assert [s["email"] for s in staff_rows] == ["cameron@example.com"]
    assert set(staff_rows[0]) == {"id", "firstName", "lastName", "email", "role", "image"}


def test_roster_lists_every_linked_account(physician_client, staff, attorney):
    res = physician_client.get("/api/staff")
    assert res.status_code == 200

    rows = {s["email"]: s["role"] for s in res.json()["staff"]}
    assert rows == {"cameron@example.com": "Staff", "counsel@example.com": "Attorney"}


def test_staff_sees_their_physicians_roster(staff_client, staff):
    res = staff_client.get("/api/staff")
    assert res.status_code == 200
    assert res.json()["staff"][0]["id"] == staff.id


def test_unlinked_staff_gets_400(unlinked_staff_client):
    res = unlinked_staff_client.get("/api/staff")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Physician ID not found for this user"


def test_physician_adds_staff_linked_to_self(physician_client, physician):
    payload = {
        "firstName": "Robert",
        "lastName": "Chase",
        "email": "Chase@Example.com",
        "password": "secret1",
        "physicianId": 999,
    }
    res = physician_client.post("/api/staff", payload, format="json")
    assert res.status_code == 201

    profile = UserProfile.objects.get(user__email="chase@example.com")
    assert profile.role == Role.STAFF
    assert profile.physician_id == physician.id


def test_duplicate_staff_email_is_409(physician_client, staff):
    payload = {"firstName": "A", "lastName": "B", "email": "cameron@example.com", "password": "secret1"}
    res = physician_client.post("/api/staff", payload, format="json")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "conflict"


def test_short_password_rejected(physician_client):
    payload = {"firstName": "A", "lastName": "B", "email": "ab@example.com", "password": "123"}
    assert physician_client.post("/api/staff", payload, format="json").status_code == 400


def test_staff_cannot_add_staff(staff_client):
    payload = {"firstName": "A", "lastName": "B", "email": "ab@example.com", "password": "secret1"}
    res = staff_client.post("/api/staff", payload, format="json")
    assert res.status_code == 403


def test_assignees_list(physician_client, staff):
    res = physician_client.get("/api/assignees")
    assert res.status_code == 200

    body = res.json()
    assert body["assignees"][:3] == ["Unclaimed", "Physician", "Assigned: Allison Cameron"]
    assert "Scheduler" in body["assignees"]
    assert body["count"] == len(body["assignees"])


def test_assignees_leave_out_linked_attorneys(physician_client, staff, attorney):
    assignees = physician_client.get("/api/assignees").json()["assignees"]
    assert "Assigned: Lee Counsel" not in assignees
