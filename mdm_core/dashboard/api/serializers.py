# mdm_core/dashboard/api/serializers.py
from rest_framework import serializers

from mdm_core.alerts.api.serializers import AlertSerializer
from mdm_core.documents.api.serializers import DocumentSerializer


class DocumentWithAlertsSerializer(DocumentSerializer):
    alerts = AlertSerializer(many=True, read_only=True)

    class Meta(DocumentSerializer.Meta):
        fields = DocumentSerializer.Meta.fields + ["alerts"]


class SuggestionsSerializer(serializers.Serializer):
    patientNames = serializers.ListField(child=serializers.CharField())
    claimNumbers = serializers.ListField(child=serializers.CharField())


class RecommendationResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = SuggestionsSerializer()


class WorkflowStatsDataSerializer(serializers.Serializer):
    stats = serializers.DictField(child=serializers.IntegerField())
    labels = serializers.ListField(child=serializers.CharField())
    vals = serializers.ListField(child=serializers.IntegerField())
    date = serializers.DateField()
    hasData = serializers.BooleanField()


class WorkflowStatsResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = WorkflowStatsDataSerializer()
