# mdm_core/documents/admin.py
from django.contrib import admin

from mdm_core.documents.models import Adl, Document, DocumentSummary, FailDoc, SummarySnapshot


class SummarySnapshotInline(admin.StackedInline):
    model = SummarySnapshot
    extra = 0


class AdlInline(admin.StackedInline):
    model = Adl
    extra = 0


class DocumentSummaryInline(admin.StackedInline):
    model = DocumentSummary
    extra = 0


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ("patient_name", "claim_number", "dob", "status", "physician", "updated_at")
    list_filter = ("status", "mode")
    search_fields = ("patient_name", "claim_number", "file_name")
    raw_id_fields = ("physician",)
    inlines = [SummarySnapshotInline, AdlInline, DocumentSummaryInline]
    ordering = ("-updated_at",)


@admin.register(FailDoc)
class FailDocAdmin(admin.ModelAdmin):
    list_display = ("file_name", "reason", "physician", "created_at")
    search_fields = ("file_name", "patient_name", "claim_number")
    raw_id_fields = ("physician",)
    ordering = ("-created_at",)
