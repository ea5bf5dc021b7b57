# conftest.py
import pytest
from rest_framework.test import APIClient

from mdm_core.documents.models import Document
from mdm_core.iam.models import Role
from mdm_core.iam.services.accounts import AccountService
from mdm_core.iam.session import issue_tokens
from mdm_core.tasks.models import Task

PASSWORD = "pass12345"


def client_for(user) -> APIClient:
    """
    APIClient carrying a real access token, so CookieOrHeaderJWTAuthentication
    and the identity claims are exercised (force_authenticate would skip them).
    """
    access, _ = issue_tokens(user)
    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
    return c


@pytest.fixture
def physician(db):
    return AccountService.create_user(
        email="house@example.com",
        password=PASSWORD,
        first_name="Gregory",
        last_name="House",
        role=Role.PHYSICIAN,
    )


@pytest.fixture
def other_physician(db):
    return AccountService.create_user(
        email="wilson@example.com",
        password=PASSWORD,
        first_name="James",
        last_name="Wilson",
        role=Role.PHYSICIAN,
    )


@pytest.fixture
def staff(db, physician):
    return AccountService.create_staff(
        physician_id=physician.id,
        email="cameron@example.com",
        password=PASSWORD,
        first_name="Allison",
        last_name="Cameron",
    )


@pytest.fixture
def unlinked_staff(db):
    return AccountService.create_user(
        email="orphan@example.com",
        password=PASSWORD,
        first_name="Lost",
        last_name="Staff",
        role=Role.STAFF,
    )


@pytest.fixture
def attorney(db, physician):
    return AccountService.create_user(
        email="counsel@example.com",
        password=PASSWORD,
        first_name="Lee",
        last_name="Counsel",
        role=Role.ATTORNEY,
        physician_id=physician.id,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def physician_client(physician):
    return client_for(physician)


@pytest.fixture
def other_physician_client(other_physician):
    return client_for(other_physician)


@pytest.fixture
def staff_client(staff):
    return client_for(staff)


@pytest.fixture
def unlinked_staff_client(unlinked_staff):
    return client_for(unlinked_staff)


@pytest.fixture
def attorney_client(attorney):
    return client_for(attorney)


@pytest.fixture
def make_document(physician):
    def _make(**kwargs) -> Document:
        kwargs.setdefault("physician", physician)
        kwargs.setdefault("patient_name", "Jane Doe")
        kwargs.setdefault("dob", "1980-01-15")
        kwargs.setdefault("claim_number", "WC-1001")
        return Document.objects.create(**kwargs)

    return _make


@pytest.fixture
def make_task(physician):
    def _make(**kwargs) -> Task:
        kwargs.setdefault("physician", physician)
        kwargs.setdefault("description", "Review labs")
        kwargs.setdefault("department", "Lab")
        kwargs.setdefault("patient", "Jane Doe")
        return Task.objects.create(**kwargs)

    return _make
