# mdm_core/documents/selectors.py
from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from django.conf import settings
from django.db.models import Q, QuerySet

from mdm_core.documents.filters import DocumentListFilter
from mdm_core.documents.models import Document, DocumentSummary, FailDoc
from mdm_core.documents.patients import PatientKey, is_placeholder, is_same_patient, normalize_claim_number

SATELLITES = ("summary_snapshot", "adl", "document_summary")


def documents_for(*, physician_id: int) -> QuerySet[Document]:
    return Document.objects.filter(physician_id=physician_id)


def list_documents(*, physician_id: int, params) -> QuerySet[Document]:
    """
    Tenant documents filtered by ``params`` (status/search), newest update first.
    The same queryset feeds both the page slice and the total count.
    """
    base = documents_for(physician_id=physician_id).select_related(*SATELLITES)
    return DocumentListFilter(params, queryset=base).qs.order_by("-updated_at", "-id")


def get_document(*, physician_id: int, document_id: UUID) -> Document:
    return documents_for(physician_id=physician_id).select_related(*SATELLITES).get(id=document_id)


def latest_documents(*, physician_id: int, limit: Optional[int] = None) -> QuerySet[Document]:
    limit = limit or settings.MDM["RECENT_LIMIT"]
    return documents_for(physician_id=physician_id).order_by("-created_at", "-id")[:limit]


def failed_documents(*, physician_id: int, limit: Optional[int] = None) -> tuple[list[FailDoc], int]:
    limit = limit or settings.MDM["RECENT_LIMIT"]
    qs = FailDoc.objects.filter(physician_id=physician_id)
    return list(qs.order_by("-created_at", "-id")[:limit]), qs.count()


def match_patient(
    *,
    physician_id: int,
    patient_name: Optional[str] = None,
    claim_number: Optional[str] = None,
) -> QuerySet[Document]:
    """
    Tenant documents whose patient name OR claim number contains the given
    text (case-insensitive). At least one term must be non-empty.
    """
    q = Q()
    if patient_name:
        q |= Q(patient_name__icontains=patient_name)
    if claim_number:
        q |= Q(claim_number__icontains=claim_number)
    if not q:
        raise ValueError("patient_name or claim_number is required")
    return documents_for(physician_id=physician_id).filter(q)


def patient_suggestions(*, physician_id: int, patient_name=None, claim_number=None) -> dict[str, list[str]]:
    """
    Distinct patient names and claim numbers for type-ahead, placeholders removed.
    """
    rows = (
        match_patient(physician_id=physician_id, patient_name=patient_name, claim_number=claim_number)
        .order_by()
        .values("patient_name", "claim_number")
        .distinct()
    )
    names: dict[str, None] = {}
    claims: dict[str, None] = {}
    for row in rows:
        if not is_placeholder(row["patient_name"]):
            names[row["patient_name"]] = None
        if not is_placeholder(row["claim_number"]):
            claims[row["claim_number"]] = None
    return {"patientNames": sorted(names), "claimNumbers": sorted(claims)}


def recent_patients(*, physician_id: int, mode: Optional[str] = None, limit: Optional[int] = None) -> list[dict[str, Any]]:
    """
    Up to ``limit`` patient groups, newest first.

    Each document joins the first group whose first document is the same
    patient (see is_same_patient); otherwise it starts a new group.
    Placeholder patient names are skipped.
    """
    limit = limit or settings.MDM["RECENT_LIMIT"]

    qs = documents_for(physician_id=physician_id).select_related("document_summary")
    if mode:
        qs = qs.filter(mode=mode)

    keys: list[PatientKey] = []
    groups: list[list[Document]] = []
    for doc in qs.order_by("-created_at", "-id"):
        if is_placeholder(doc.patient_name):
            continue
        key = PatientKey.for_values(doc.patient_name, doc.dob, doc.claim_number)
        for group_key, group in zip(keys, groups):
            if is_same_patient(key, group_key):
                group.append(doc)
                break
        else:
            # groups open newest first; anything past the cap stays out
            if len(groups) < limit:
                keys.append(key)
                groups.append([doc])

    return [_summarize_group(docs) for docs in groups]


def _first_dob(docs: list[Document]) -> str:
    for doc in docs:
        if not is_placeholder(doc.dob):
            return doc.dob
    return ""


def _first_claim(docs: list[Document]) -> str:
    for doc in docs:
        if normalize_claim_number(doc.claim_number):
            return doc.claim_number
    return ""


def _document_type(doc: Document) -> Optional[str]:
    try:
        return doc.document_summary.summary_type or None
    except DocumentSummary.DoesNotExist:
        return None


def _summarize_group(docs: list[Document]) -> dict[str, Any]:
    newest = docs[0]
    entry: dict[str, Any] = {
        "patientName": max((d.patient_name.strip() for d in docs), key=len),
        "dob": _first_dob(docs),
        "claimNumber": _first_claim(docs),
        "createdAt": newest.created_at,
        "reportDate": newest.report_date,
        "documentCount": len(docs),
        "documentIds": [str(d.id) for d in docs],
        "documentType": _document_type(newest),
    }
    if len(docs) > 1:
        entry["matchingDocuments"] = [
            {
                "id": str(d.id),
                "patientName": d.patient_name,
                "dob": d.dob,
                "claimNumber": d.claim_number,
                "createdAt": d.created_at,
                "reportDate": d.report_date,
                "mode": d.mode,
                "documentType": _document_type(d),
            }
            for d in docs
        ]
    return entry
