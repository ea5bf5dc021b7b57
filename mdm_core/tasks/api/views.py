# mdm_core/tasks/api/views.py
from __future__ import annotations

from uuid import UUID

from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from mdm_core.iam.auth import require_owner
from mdm_core.tasks.api.pagination import TaskPagination
from mdm_core.tasks.api.serializers import (
    ManualTaskCreateSerializer,
    TaskListResponseSerializer,
    TaskSerializer,
    TaskUpdateSerializer,
)
from mdm_core.tasks.models import Task
from mdm_core.tasks.selectors import TaskSelector
from mdm_core.tasks.services import TaskService

MISSING_TASK_FIELDS_MSG = "Missing required fields: description, department, patient"


class ManualTaskCreateView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=ManualTaskCreateSerializer, responses={200: TaskSerializer}, tags=["Tasks"])
    def post(self, request):
        _, owner_id = require_owner(request)

        ser = ManualTaskCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        if ser.missing_fields():
            raise DRFValidationError({"detail": MISSING_TASK_FIELDS_MSG, "missing": ser.missing_fields()})
        data = ser.validated_data

        raw_document_id = (data.get("documentId") or "").strip()
        document_id = None
        if raw_document_id:
            try:
                document_id = UUID(raw_document_id)
            except ValueError:
                raise DRFValidationError({"detail": "Invalid documentId"})

        try:
            task = TaskService.create_manual_task(
                physician_id=owner_id,
                description=data["description"],
                department=data["department"],
                patient=data["patient"],
                due_date=data.get("dueDate"),
                actions=data.get("actions"),
                status=data.get("status"),
                document_id=document_id,
            )
        except ValueError as e:
            raise DRFValidationError({"detail": str(e)})

        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)


class TaskListView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter("search", str),
            OpenApiParameter("dept", str),
            OpenApiParameter("status", str),
            OpenApiParameter("overdueOnly", bool),
            OpenApiParameter("assignedTo", str, enum=["me", "unassigned"]),
            OpenApiParameter("priority", str, enum=["high", "medium", "low"]),
            OpenApiParameter("dueDate", str, enum=["today", "week", "month"]),
            OpenApiParameter("sortBy", str),
            OpenApiParameter("sortOrder", str, enum=["asc", "desc"]),
            OpenApiParameter("page", int),
            OpenApiParameter("pageSize", int),
        ],
        responses={200: TaskListResponseSerializer},
        tags=["Tasks"],
    )
    def get(self, request):
        _, owner_id = require_owner(request)

        now = timezone.now()
        try:
            qs = TaskSelector.list_tasks(physician_id=owner_id, params=request.query_params, now=now)
        except ValueError as e:
            raise DRFValidationError({"detail": str(e)})

        paginator = TaskPagination()
        tasks = paginator.paginate_queryset(qs, request, view=self)
        return paginator.get_paginated_response(TaskSerializer(tasks, many=True, context={"now": now}).data)


class TaskDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=TaskUpdateSerializer, responses={200: TaskSerializer}, tags=["Tasks"])
    def patch(self, request, task_id: UUID):
        _, owner_id = require_owner(request)

        ser = TaskUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            task = TaskService.update_task(physician_id=owner_id, task_id=task_id, changes=ser.changes())
        except Task.DoesNotExist:
            raise NotFound("Task not found")

        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)


class OfficePulseView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["Tasks"])
    def get(self, request):
        _, owner_id = require_owner(request)

        now = timezone.now()
        tasks, pulse = TaskSelector.office_pulse(physician_id=owner_id, now=now)
        return Response(
            {"tasks": TaskSerializer(tasks, many=True, context={"now": now}).data, "pulse": pulse},
            status=status.HTTP_200_OK,
        )
