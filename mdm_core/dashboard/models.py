# mdm_core/dashboard/models.py
from django.db import models

from mdm_core.common.models import TimeStampedModel


class WorkflowStats(TimeStampedModel):
    """
    Daily office workflow counters written by the ingestion pipeline.
    Several rows may exist for a day; the newest one wins.
    """
    date = models.DateField(db_index=True)

    referrals_processed = models.PositiveIntegerField(default=0)
    rfas_monitored = models.PositiveIntegerField(default=0)
    qme_upcoming = models.PositiveIntegerField(default=0)
    payer_disputes = models.PositiveIntegerField(default=0)
    external_docs = models.PositiveIntegerField(default=0)
    intakes_created = models.PositiveIntegerField(default=0)

    COUNTERS = (
        ("referralsProcessed", "referrals_processed", "Referrals Processed"),
        ("rfasMonitored", "rfas_monitored", "RFAs Monitored"),
        ("qmeUpcoming", "qme_upcoming", "QME Upcoming"),
        ("payerDisputes", "payer_disputes", "Payer Disputes"),
        ("externalDocs", "external_docs", "External Docs"),
        ("intakesCreated", "intakes_created", "Intakes Created"),
    )

    class Meta:
        db_table = "dashboard_workflow_stats"
        verbose_name_plural = "workflow stats"

    def __str__(self) -> str:
        return f"Workflow stats {self.date}"
