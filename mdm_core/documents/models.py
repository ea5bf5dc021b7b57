# mdm_core/documents/models.py
import uuid

from django.db import models

from mdm_core.common.models import PhysicianOwnedModel


class DocumentStatus(models.TextChoices):
    # Known values; the column accepts other strings written by ingestion.
    PENDING = "pending", "Pending"
    FAILED = "failed", "Failed"
    VERIFIED = "verified", "Verified"
    COMPLETED = "completed", "Completed"


class DocumentMode(models.TextChoices):
    WORKERS_COMP = "wc", "Workers' compensation"
    GENERAL_MEDICINE = "gm", "General medicine"


class Document(PhysicianOwnedModel):
    """
    One uploaded medical document with its extracted patient/claim metadata.
    Patient identity is the natural key (patient_name, dob); there is no Patient table.
    """
    patient_name = models.CharField(max_length=255, db_index=True)
    dob = models.CharField(max_length=32, blank=True, default="")
    doi = models.CharField(max_length=32, blank=True, default="")
    claim_number = models.CharField(max_length=128, blank=True, default="", db_index=True)

    status = models.CharField(max_length=32, default=DocumentStatus.PENDING, db_index=True)
    mode = models.CharField(max_length=8, choices=DocumentMode.choices, blank=True, default="")

    file_name = models.CharField(max_length=255, blank=True, default="")
    blob_path = models.CharField(max_length=1024, blank=True, default="")
    gcs_file_link = models.URLField(max_length=1024, blank=True, default="")

    brief_summary = models.TextField(blank=True, default="")
    report_date = models.DateField(null=True, blank=True)
    ur_denial_reason = models.TextField(blank=True, default="")

    class Meta:
        db_table = "documents_document"
        indexes = [
            models.Index(fields=["physician", "updated_at"], name="doc_physician_updated_idx"),
            models.Index(fields=["physician", "patient_name", "dob"], name="doc_physician_patient_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.patient_name} ({self.claim_number or 'no claim'})"


class SummarySnapshot(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    document = models.OneToOneField(Document, on_delete=models.CASCADE, related_name="summary_snapshot")

    dx = models.TextField(blank=True, default="")
    key_concern = models.TextField(blank=True, default="")
    next_step = models.TextField(blank=True, default="")

    class Meta:
        db_table = "documents_summary_snapshot"


class Adl(models.Model):
    """Activities of daily living extracted from a document."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    document = models.OneToOneField(Document, on_delete=models.CASCADE, related_name="adl")

    adls_affected = models.TextField(blank=True, default="")
    work_restrictions = models.TextField(blank=True, default="")

    class Meta:
        db_table = "documents_adl"


class DocumentSummary(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    document = models.OneToOneField(Document, on_delete=models.CASCADE, related_name="document_summary")

    summary_type = models.CharField(max_length=128, blank=True, default="")
    date = models.DateField(null=True, blank=True)
    summary = models.TextField(blank=True, default="")

    class Meta:
        db_table = "documents_document_summary"


class FailDoc(PhysicianOwnedModel):
    """
    A file the ingestion pipeline could not turn into a Document.
    """
    reason = models.TextField(blank=True, default="")

    file_name = models.CharField(max_length=255, blank=True, default="")
    blob_path = models.CharField(max_length=1024, blank=True, default="")
    gcs_file_link = models.URLField(max_length=1024, blank=True, default="")

    patient_name = models.CharField(max_length=255, blank=True, default="")
    claim_number = models.CharField(max_length=128, blank=True, default="")
    dob = models.CharField(max_length=32, blank=True, default="")
    doi = models.CharField(max_length=32, blank=True, default="")

    class Meta:
        db_table = "documents_fail_doc"
        indexes = [
            models.Index(fields=["physician", "created_at"], name="faildoc_physician_created_idx"),
        ]

    def __str__(self) -> str:
        return self.file_name or str(self.id)
