# mdm_core/tasks/api/serializers.py
from __future__ import annotations

from django.utils import timezone
from rest_framework import serializers

from mdm_core.tasks.models import Task, TaskStatus
from mdm_core.tasks.selectors import task_priority


class OptionalDateTimeField(serializers.DateTimeField):
    """A blank string is read as null."""

    def validate_empty_values(self, data):
        if data == "":
            data = None
        return super().validate_empty_values(data)


class TaskSerializer(serializers.ModelSerializer):
    dueDate = serializers.DateTimeField(source="due_date", allow_null=True)
    documentId = serializers.UUIDField(source="document_id", allow_null=True)
    physicianId = serializers.IntegerField(source="physician_id")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    priority = serializers.SerializerMethodField()
    urDenialReason = serializers.SerializerMethodField()

    class Meta:
        model = Task
        fields = [
            "id",
            "description",
            "department",
            "patient",
            "status",
            "actions",
            "dueDate",
            "documentId",
            "physicianId",
            "createdAt",
            "updatedAt",
            "priority",
            "urDenialReason",
        ]

    def get_priority(self, obj: Task) -> str:
        return task_priority(obj, self.context.get("now") or timezone.now())

    def get_urDenialReason(self, obj: Task) -> str | None:
        if obj.document_id is None:
            return None
        return obj.document.ur_denial_reason or None


class ManualTaskCreateSerializer(serializers.Serializer):
    description = serializers.CharField(required=False, allow_blank=True, default="")
    department = serializers.CharField(required=False, allow_blank=True, default="")
    patient = serializers.CharField(required=False, allow_blank=True, default="")
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    actions = serializers.ListField(child=serializers.CharField(), required=False, allow_empty=True)
    dueDate = OptionalDateTimeField(required=False, allow_null=True)
    documentId = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    REQUIRED = ("description", "department", "patient")

    def missing_fields(self) -> list[str]:
        data = self.validated_data
        return [name for name in self.REQUIRED if not (data.get(name) or "").strip()]


class TaskUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    actions = serializers.ListField(child=serializers.CharField(), required=False, allow_empty=True)
    dueDate = OptionalDateTimeField(required=False, allow_null=True)
    description = serializers.CharField(required=False)
    department = serializers.CharField(required=False)
    patient = serializers.CharField(required=False)

    FIELD_MAP = {"dueDate": "due_date"}

    def changes(self) -> dict:
        return {self.FIELD_MAP.get(k, k): v for k, v in self.validated_data.items()}


class TaskListResponseSerializer(serializers.Serializer):
    tasks = TaskSerializer(many=True)
    totalCount = serializers.IntegerField()
