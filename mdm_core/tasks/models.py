# mdm_core/tasks/models.py
from django.db import models

from mdm_core.common.models import PhysicianOwnedModel
from mdm_core.documents.models import Document


class TaskStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    IN_PROGRESS = "In Progress", "In Progress"
    DONE = "Done", "Done"
    COMPLETED = "Completed", "Completed"
    CLOSED = "Closed", "Closed"


CLOSED_STATUSES = (TaskStatus.DONE, TaskStatus.COMPLETED, TaskStatus.CLOSED)


class TaskAction:
    CLAIM = "Claim"
    COMPLETE = "Complete"
    CLAIMED = "Claimed"


def default_actions() -> list[str]:
    return [TaskAction.CLAIM, TaskAction.COMPLETE]


class Task(PhysicianOwnedModel):
    """
    Work item for a physician's office, optionally tied to a document.
    ``actions`` is the ordered list of UI action labels; "Claimed" marks a claimed task.
    """
    description = models.TextField()
    department = models.CharField(max_length=128, db_index=True)
    patient = models.CharField(max_length=255)

    status = models.CharField(
        max_length=32,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
        db_index=True,
    )
    actions = models.JSONField(default=default_actions, blank=True)

    due_date = models.DateTimeField(null=True, blank=True, db_index=True)

    document = models.ForeignKey(
        Document,
        on_delete=models.SET_NULL,
        related_name="tasks",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "tasks_task"
        indexes = [
            models.Index(fields=["physician", "status", "due_date"], name="task_physician_status_due_idx"),
            models.Index(fields=["physician", "department"], name="task_physician_dept_idx"),
        ]

    @property
    def is_claimed(self) -> bool:
        return TaskAction.CLAIMED in (self.actions or [])

    def __str__(self) -> str:
        return f"{self.department}: {self.description[:40]}"
