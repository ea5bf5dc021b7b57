# mdm_core/documents/filters.py
from __future__ import annotations

import django_filters

from mdm_core.documents.models import Document


class DocumentListFilter(django_filters.FilterSet):
    """
    Query-string filters for the physician document list.
    ``status=all`` (or no status) means no status filter.
    """
    status = django_filters.CharFilter(method="filter_status")
    search = django_filters.CharFilter(field_name="patient_name", lookup_expr="icontains")

    class Meta:
        model = Document
        fields = ["status", "search"]

    def filter_status(self, queryset, name, value):
        if value.strip().lower() == "all":
            return queryset
        return queryset.filter(status__iexact=value.strip())
