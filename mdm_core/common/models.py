# mdm_core/common/models.py
from __future__ import annotations

import uuid

from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    """
    Standard timestamps for all entities.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class PhysicianOwnedModel(TimeStampedModel):
    """
    Row owned by exactly one physician account (the tenant).

    Every read and write of a subclass must be filtered by ``physician_id``;
    selectors and services take it as a required keyword argument.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    physician = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="+",
    )

    class Meta:
        abstract = True
