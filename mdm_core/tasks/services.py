# mdm_core/tasks/services.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction

from mdm_core.documents.models import Document
from mdm_core.tasks.models import Task, TaskStatus, default_actions

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task write operations. Every call is scoped by the tenant's physician_id.
    """

    UPDATABLE_FIELDS = ("status", "actions", "due_date", "description", "department", "patient")

    @staticmethod
    @transaction.atomic
    def create_manual_task(
        *,
        physician_id: int,
        description: str,
        department: str,
        patient: str,
        due_date: Optional[datetime] = None,
        actions: Optional[list[str]] = None,
        status: Optional[str] = None,
        document_id: Optional[UUID] = None,
    ) -> Task:
        """
        Creates a task owned by ``physician_id``.
        Raises ValueError when ``document_id`` is not a document of the same tenant.
        """
        if document_id is not None and not Document.objects.filter(id=document_id, physician_id=physician_id).exists():
            raise ValueError("Document not found for this physician")

        task = Task.objects.create(
            physician_id=physician_id,
            description=description,
            department=department,
            patient=patient,
            status=status or TaskStatus.PENDING,
            actions=list(actions) if actions else default_actions(),
            due_date=due_date,
            document_id=document_id,
        )
        logger.info("Manual task %s created for physician %s", task.id, physician_id)
        return task

    @staticmethod
    @transaction.atomic
    def update_task(*, physician_id: int, task_id: UUID, changes: dict) -> Task:
        """
        Partial update; unknown keys are ignored. Raises Task.DoesNotExist outside the tenant.
        """
        task = Task.objects.select_for_update().get(id=task_id, physician_id=physician_id)

        update_fields = []
        for field in TaskService.UPDATABLE_FIELDS:
            if field in changes:
                setattr(task, field, changes[field])
                update_fields.append(field)

        if update_fields:
            update_fields.append("updated_at")
            task.save(update_fields=update_fields)
        return task
