# mdm_core/alerts/models.py
from __future__ import annotations

import uuid

from django.db import models
from django.utils import timezone

from mdm_core.common.models import TimeStampedModel
from mdm_core.documents.models import Document


class Alert(TimeStampedModel):
    """
    Clinical or administrative flag raised on a document by ingestion.
    Tenant scope comes from the parent document's physician.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    document = models.ForeignKey(Document, on_delete=models.CASCADE, related_name="alerts")

    alert_type = models.CharField(max_length=64, db_index=True)
    title = models.CharField(max_length=255)
    date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=32, blank=True, default="")
    description = models.TextField(blank=True, default="")

    is_resolved = models.BooleanField(default=False, db_index=True)
    resolved_at = models.DateTimeField(null=True, blank=True)
    resolved_by = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "alerts_alert"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["document", "is_resolved"], name="alert_document_resolved_idx"),
        ]

    def resolve(self, *, by: str) -> None:
        self.is_resolved = True
        self.resolved_at = timezone.now()
        self.resolved_by = by
        self.save(update_fields=["is_resolved", "resolved_at", "resolved_by", "updated_at"])

    def __str__(self) -> str:
        return f"{self.alert_type}: {self.title}"
