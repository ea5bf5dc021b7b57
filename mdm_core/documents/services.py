# mdm_core/documents/services.py
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from mdm_core.documents.models import Document, DocumentStatus
from mdm_core.documents.patients import date_lookup_values, normalize_date_string

logger = logging.getLogger(__name__)

PATIENT_FIELDS = {
    "patientName": "patient_name",
    "dob": "dob",
    "doi": "doi",
    "claimNumber": "claim_number",
}


class DocumentService:
    @staticmethod
    @transaction.atomic
    def update_document(
        *,
        physician_id: int,
        document_id: UUID,
        patient_name: str,
        claim_number: str,
        dob: Optional[str] = None,
        doi: Optional[str] = None,
    ) -> Document:
        """
        Corrects the extracted patient fields of one tenant document.
        dob/doi are only touched when supplied; raises ValueError for bad dates.
        """
        patient_name = (patient_name or "").strip()
        claim_number = (claim_number or "").strip()
        if not patient_name:
            raise ValueError("Patient name is required")
        if not claim_number:
            raise ValueError("Claim number is required")

        doc = Document.objects.select_for_update().get(id=document_id, physician_id=physician_id)
        doc.patient_name = patient_name
        doc.claim_number = claim_number
        update_fields = ["patient_name", "claim_number", "updated_at"]

        if dob is not None:
            doc.dob = normalize_date_string(dob)
            update_fields.append("dob")
        if doi is not None:
            doc.doi = normalize_date_string(doi)
            update_fields.append("doi")

        doc.save(update_fields=update_fields)
        return doc

    @staticmethod
    @transaction.atomic
    def verify_documents(
        *,
        physician_id: int,
        patient_name: str,
        dob: Optional[str] = None,
        doi: Optional[str] = None,
    ) -> int:
        """
        Marks every not-yet-verified tenant document of the patient as verified.
        Returns the number of rows changed; a repeat call returns 0.
        """
        qs = Document.objects.filter(physician_id=physician_id, patient_name=patient_name)
        if dob:
            qs = qs.filter(dob__in=date_lookup_values(dob))
        if doi:
            qs = qs.filter(doi__in=date_lookup_values(doi))

        count = qs.exclude(status=DocumentStatus.VERIFIED).update(
            status=DocumentStatus.VERIFIED,
            updated_at=timezone.now(),
        )
        logger.info("Verified %s document(s) for physician %s", count, physician_id)
        return count

    @staticmethod
    @transaction.atomic
    def update_patient(
        *,
        physician_id: int,
        original_name: str,
        original_dob: str,
        updated: dict,
    ) -> int:
        """
        Cascades patient-level edits to every tenant document sharing
        (patient_name, dob). Blank values keep each row's current value.
        Returns the number of matched rows (0 means nothing was written).
        """
        changes = {}
        for key, field in PATIENT_FIELDS.items():
            value = (updated.get(key) or "").strip()
            if not value:
                continue
            if field in ("dob", "doi"):
                value = normalize_date_string(value)
            changes[field] = value

        qs = Document.objects.filter(
            physician_id=physician_id,
            patient_name=original_name,
            dob__in=date_lookup_values(original_dob),
        )
        if not changes:
            return qs.count()

        count = qs.update(**changes, updated_at=timezone.now())
        logger.info("Patient cascade touched %s document(s) for physician %s", count, physician_id)
        return count
