# mdm_core/alerts/api/serializers.py
from rest_framework import serializers

from mdm_core.alerts.models import Alert


class AlertSerializer(serializers.ModelSerializer):
    alertType = serializers.CharField(source="alert_type")
    isResolved = serializers.BooleanField(source="is_resolved")
    resolvedAt = serializers.DateTimeField(source="resolved_at", allow_null=True)
    resolvedBy = serializers.CharField(source="resolved_by")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Alert
        fields = [
            "id",
            "alertType",
            "title",
            "date",
            "status",
            "description",
            "isResolved",
            "resolvedAt",
            "resolvedBy",
            "createdAt",
            "updatedAt",
        ]
