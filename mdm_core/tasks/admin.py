# mdm_core/tasks/admin.py
from django.contrib import admin

from mdm_core.tasks.models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("description", "department", "patient", "status", "due_date", "physician", "created_at")
    list_filter = ("status", "department")
    search_fields = ("description", "patient", "department")
    raw_id_fields = ("physician", "document")
    ordering = ("-created_at",)
