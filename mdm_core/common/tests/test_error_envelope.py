import pytest
from django.db import DatabaseError
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


def test_missing_session_returns_401_envelope():
    res = APIClient().get("/api/tasks")
    assert res.status_code == 401

    body = res.json()
    assert body["error"]["code"] == "not_authenticated"
    assert body["error"]["request_id"]


def test_validation_error_message_is_lifted_from_detail(physician_client):
    res = physician_client.post("/api/add-manual-task", {}, format="json")
    assert res.status_code == 400

    body = res.json()
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["message"] == "Missing required fields: description, department, patient"


def test_store_failure_is_generic_500(physician_client, monkeypatch):
    def boom(**kwargs):
        raise DatabaseError("connection reset by peer at 10.0.0.5")

    monkeypatch.setattr("mdm_core.tasks.selectors.TaskSelector.office_pulse", boom)

    res = physician_client.get("/api/office-pulse")
    assert res.status_code == 500

    body = res.json()
    assert body["error"]["code"] == "server_error"
    assert body["error"]["message"] == "Unexpected server error."
    assert "10.0.0.5" not in res.content.decode()
