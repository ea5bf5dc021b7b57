# mdm_core/alerts/admin.py
from django.contrib import admin

from mdm_core.alerts.models import Alert


@admin.register(Alert)
class AlertAdmin(admin.ModelAdmin):
    list_display = ("title", "alert_type", "status", "is_resolved", "document", "created_at")
    list_filter = ("alert_type", "is_resolved")
    search_fields = ("title", "description", "document__patient_name")
    raw_id_fields = ("document",)
    actions = ["mark_resolved"]

    @admin.action(description="Mark selected alerts resolved")
    def mark_resolved(self, request, queryset):
        for alert in queryset.filter(is_resolved=False):
            alert.resolve(by=request.user.get_username())
