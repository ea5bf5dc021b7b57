# mdm_core/audit/models.py
import uuid

from django.conf import settings
from django.db import models


class AuditLog(models.Model):
    """
    Append-only record of who touched patient data, where and how.
    Rows are never updated or deleted by application code.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    actor_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="audit_logs",
        null=True,
        blank=True,
    )
    email = models.EmailField(blank=True, default="")

    action = models.TextField()
    path = models.CharField(max_length=512)
    method = models.CharField(max_length=16)

    occurred_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "audit_log"
        indexes = [
            models.Index(fields=["actor_user", "occurred_at"], name="audit_log_actor_time_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.method} {self.path} by {self.email or self.actor_user_id}"
