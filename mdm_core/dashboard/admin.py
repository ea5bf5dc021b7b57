from django.contrib import admin

from mdm_core.dashboard.models import WorkflowStats


@admin.register(WorkflowStats)
class WorkflowStatsAdmin(admin.ModelAdmin):
    list_display = ("date", "referrals_processed", "rfas_monitored", "qme_upcoming", "payer_disputes", "external_docs", "intakes_created")
    date_hierarchy = "date"
    ordering = ("-date", "-created_at")
