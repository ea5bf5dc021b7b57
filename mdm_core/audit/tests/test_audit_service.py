import logging

import pytest
from django.db import DatabaseError
from django.test import RequestFactory

from mdm_core.audit.models import AuditLog
from mdm_core.audit.services import AuditService
from mdm_core.iam.models import Role
from mdm_core.iam.session import Identity

pytestmark = pytest.mark.django_db


def test_record_writes_row(physician):
    entry = AuditService.record(
        actor_id=physician.id,
        actor_email=physician.email,
        action="Viewed document",
        path="/api/get-patient",
        method="GET",
    )
    assert entry is not None

    row = AuditLog.objects.get()
    assert row.actor_user_id == physician.id
    assert row.email == physician.email
    assert row.action == "Viewed document"
    assert row.method == "GET"
    assert row.occurred_at is not None


def test_record_swallows_and_logs_failures(monkeypatch, caplog, physician):
    def boom(**kwargs):
        raise DatabaseError("audit table missing")

    monkeypatch.setattr(AuditLog.objects, "create", boom)

    with caplog.at_level(logging.ERROR, logger="mdm_core.audit.services"):
        entry = AuditService.record(
            actor_id=physician.id, actor_email="", action="x", path="/api/tasks", method="GET"
        )

    assert entry is None
    assert "Audit write failed" in caplog.text


def test_record_request_uses_request_path_and_method(physician):
    request = RequestFactory().post("/api/verify-document")
    identity = Identity(
        user_id=physician.id,
        email=physician.email,
        role=Role.PHYSICIAN,
        physician_id=None,
        expires_at=None,
        refresh_expires_at=None,
    )

    AuditService.record_request(request, identity, "Verified 2 document(s)")

    row = AuditLog.objects.get()
    assert (row.path, row.method, row.action) == ("/api/verify-document", "POST", "Verified 2 document(s)")
