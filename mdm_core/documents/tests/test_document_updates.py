from urllib.parse import quote

import pytest
from django.db import DatabaseError

from mdm_core.audit.models import AuditLog
from mdm_core.documents.models import Document

pytestmark = pytest.mark.django_db


def test_verify_is_idempotent(physician_client, make_document):
    make_document(patient_name="Jane Doe")
    make_document(patient_name="Jane Doe", status="verified")
    make_document(patient_name="Jane Doe")

    first = physician_client.post("/api/verify-document?patient_name=Jane%20Doe")
    assert first.status_code == 200
    assert first.json()["count"] == 2

    second = physician_client.post("/api/verify-document?patient_name=Jane%20Doe")
    assert second.status_code == 404
    assert Document.objects.filter(status="verified").count() == 3


def test_verify_unknown_patient_is_404(physician_client):
    res = physician_client.post("/api/verify-document?patient_name=UnknownName")
    assert res.status_code == 404
    assert res.json()["error"]["message"].startswith("No documents found")


def test_verify_narrows_by_dob_and_stays_in_tenant(physician_client, make_document, other_physician):
    keep = make_document(patient_name="Jane Doe", dob="1990-02-02")
    hit = make_document(patient_name="Jane Doe", dob="1980-01-15")
    foreign = make_document(patient_name="Jane Doe", physician=other_physician)

    res = physician_client.post("/api/verify-document?patient_name=Jane%20Doe&dob=1980-01-15T00:00:00Z")
    assert res.json()["count"] == 1

    for doc in (keep, hit, foreign):
        doc.refresh_from_db()
    assert hit.status == "verified"
    assert keep.status == "pending"
    assert foreign.status == "pending"


@pytest.mark.parametrize("stored", ["01/15/1980", "Jan 15th 1980"])
def test_verify_matches_free_text_dob_as_stored(physician_client, make_document, stored):
    doc = make_document(patient_name="Jane Doe", dob=stored)

    res = physician_client.post(f"/api/verify-document?patient_name=Jane%20Doe&dob={quote(stored)}")
    assert res.status_code == 200
    assert res.json()["count"] == 1

    doc.refresh_from_db()
    assert doc.status == "verified"


def test_verify_requires_patient_name(physician_client):
    assert physician_client.post("/api/verify-document").status_code == 400


def test_update_document_normalizes_dates(physician_client, make_document):
    doc = make_document()
    res = physician_client.patch(
        f"/api/update-document?documentId={doc.id}",
        {"patientName": " Jane Q Doe ", "claimNumber": "WC-2002", "dob": "1980-01-15T00:00:00.000Z"},
        format="json",
    )
    assert res.status_code == 200
    assert res.json()["success"] is True

    doc.refresh_from_db()
    assert doc.patient_name == "Jane Q Doe"
    assert doc.claim_number == "WC-2002"
    assert doc.dob == "1980-01-15"


@pytest.mark.parametrize(
    "payload,message",
    [
        ({"claimNumber": "WC-1"}, "Patient name is required"),
        ({"patientName": "Jane", "claimNumber": "  "}, "Claim number is required"),
        ({"patientName": "Jane", "claimNumber": "WC-1", "dob": "someday"}, "Invalid date: 'someday'"),
    ],
)
def test_update_document_validation(physician_client, make_document, payload, message):
    doc = make_document()
    res = physician_client.patch(f"/api/update-document?documentId={doc.id}", payload, format="json")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == message


def test_update_document_other_tenant_is_404(physician_client, make_document, other_physician):
    doc = make_document(physician=other_physician)
    res = physician_client.patch(
        f"/api/update-document?documentId={doc.id}",
        {"patientName": "X", "claimNumber": "Y"},
        format="json",
    )
    assert res.status_code == 404


def test_update_document_requires_id(physician_client):
    res = physician_client.patch("/api/update-document", {"patientName": "X", "claimNumber": "Y"}, format="json")
    assert res.status_code == 400


def test_patient_update_cascades(physician_client, make_document):
    a = make_document(patient_name="Jane Doe", dob="1980-01-15", claim_number="WC-1", doi="2023-05-01")
    b = make_document(patient_name="Jane Doe", dob="1980-01-15", claim_number="WC-2")
    other = make_document(patient_name="Jane Doe", dob="1975-07-07")

    res = physician_client.post(
        "/api/patients/update",
        {
            "originalPatient": {"patientName": "Jane Doe", "dob": "1980-01-15"},
            "updatedData": {"patientName": "Jane Roe", "claimNumber": "", "doi": ""},
        },
        format="json",
    )
    assert res.status_code == 200
    assert res.json()["updatedCount"] == 2
    assert res.json()["patient"]["patientName"] == "Jane Roe"

    for doc in (a, b, other):
        doc.refresh_from_db()
    assert (a.patient_name, a.claim_number, a.doi) == ("Jane Roe", "WC-1", "2023-05-01")
    assert (b.patient_name, b.claim_number) == ("Jane Roe", "WC-2")
    assert other.patient_name == "Jane Doe"


def test_patient_update_no_match_is_404(physician_client):
    res = physician_client.post(
        "/api/patients/update",
        {"originalPatient": {"patientName": "Nobody", "dob": "2000-01-01"}, "updatedData": {"patientName": "X"}},
        format="json",
    )
    assert res.status_code == 404


def test_patient_update_requires_both_parts(physician_client):
    res = physician_client.post("/api/patients/update", {"updatedData": {}}, format="json")
    assert res.status_code == 400


def test_audit_failure_does_not_fail_request(physician_client, make_document, monkeypatch):
    make_document(patient_name="Jane Doe")

    def broken_create(**kwargs):
        raise DatabaseError("audit table locked")

    monkeypatch.setattr(AuditLog.objects, "create", broken_create)

    res = physician_client.post("/api/verify-document?patient_name=Jane%20Doe")
    assert res.status_code == 200
    assert Document.objects.get().status == "verified"
