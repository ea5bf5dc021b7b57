# mdm_core/audit/admin.py
from django.contrib import admin

from mdm_core.audit.models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("occurred_at", "email", "method", "path", "action")
    list_filter = ("method",)
    search_fields = ("email", "path", "action")
    readonly_fields = ("actor_user", "email", "action", "path", "method", "occurred_at")
    ordering = ("-occurred_at",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
