# mdm_core/dashboard/selectors.py
from __future__ import annotations

from datetime import date
from typing import Any, Optional

from django.db.models import Prefetch, QuerySet

from mdm_core.alerts.models import Alert
from mdm_core.dashboard.models import WorkflowStats
from mdm_core.documents.models import Document
from mdm_core.documents.selectors import match_patient


def search_patient_documents(
    *,
    physician_id: int,
    patient_name: Optional[str] = None,
    claim_number: Optional[str] = None,
) -> QuerySet[Document]:
    """Matching tenant documents, newest first, with their alerts."""
    return (
        match_patient(physician_id=physician_id, patient_name=patient_name, claim_number=claim_number)
        .prefetch_related(Prefetch("alerts", queryset=Alert.objects.order_by("-created_at")))
        .order_by("-created_at", "-id")
    )


def workflow_stats_for(day: date) -> dict[str, Any]:
    """
    Counters of the newest WorkflowStats row for ``day``; zeros when none.
    """
    row = WorkflowStats.objects.filter(date=day).order_by("-created_at", "-id").first()

    stats = {key: (getattr(row, field) if row else 0) for key, field, _ in WorkflowStats.COUNTERS}
    return {
        "stats": stats,
        "labels": [label for _, _, label in WorkflowStats.COUNTERS],
        "vals": list(stats.values()),
        "date": day.isoformat(),
        "hasData": row is not None,
    }
