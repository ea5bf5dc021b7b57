# mdm_core/audit/services.py
from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction

from mdm_core.audit.models import AuditLog

logger = logging.getLogger(__name__)


class AuditService:
    """
    Central audit writer.

    Recording never raises: a failed write is logged and the caller's
    request carries on. Each write runs in its own savepoint so a failure
    cannot poison an enclosing transaction.
    """

    @staticmethod
    def record(
        *,
        actor_id: Optional[int],
        actor_email: str,
        action: str,
        path: str,
        method: str,
    ) -> Optional[AuditLog]:
        try:
            with transaction.atomic():
                return AuditLog.objects.create(
                    actor_user_id=actor_id,
                    email=actor_email or "",
                    action=action,
                    path=path,
                    method=method,
                )
        except Exception:
            logger.exception("Audit write failed for %s %s (actor=%s)", method, path, actor_id)
            return None

    @staticmethod
    def record_request(request, identity, action: str) -> Optional[AuditLog]:
        """
        Records ``action`` against the current request path/method for ``identity``.
        """
        return AuditService.record(
            actor_id=identity.user_id,
            actor_email=identity.email,
            action=action,
            path=request.path,
            method=request.method,
        )
