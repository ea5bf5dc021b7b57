# mdm_core/common/middleware.py
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from django.conf import settings
from django.http import HttpResponseRedirect
from django.utils import timezone
from django.utils.deprecation import MiddlewareMixin

from mdm_core.iam.models import Role
from mdm_core.iam.session import Identity, resolve_identity

logger = logging.getLogger(__name__)


def path_matches(path: str, prefix: str) -> bool:
    """
    Segment-aware prefix match: "/tasks" matches "/tasks" and "/tasks/1",
    never "/tasksfoo".
    """
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


class RoleRouteGuardMiddleware(MiddlewareMixin):
    """
    Guards browser page routes by role.

    Behavior:
      - Only GUARDED_PREFIXES are inspected; /api/* is left to DRF authentication.
      - No session, a bad token, or an expired access/refresh window -> redirect to
        the sign-in page with callbackUrl set to the requested path.
      - Role dashboards: Staff on /dashboard -> /staff-dashboard,
        Attorney on /dashboard -> /attorney-dashboard.
      - ROUTE_RULES: (prefixes, allowed roles, redirect target); first match wins.
      - On success -> attaches request.identity.
    """

    GUARDED_PREFIXES = (
        "/dashboard",
        "/staff-dashboard",
        "/attorney-dashboard",
        "/tasks",
        "/add-staff",
        "/upload",
        "/documents",
    )

    DASHBOARD_PREFIX = "/dashboard"
    DASHBOARD_BY_ROLE = {
        Role.STAFF: "/staff-dashboard",
        Role.ATTORNEY: "/attorney-dashboard",
    }

    ROUTE_RULES = (
        (("/add-staff",), frozenset({Role.PHYSICIAN}), "/dashboard"),
        (("/tasks",), frozenset({Role.PHYSICIAN, Role.STAFF}), "/dashboard"),
        (("/upload", "/documents", "/staff-dashboard"), frozenset({Role.STAFF}), "/dashboard"),
        (("/attorney-dashboard",), frozenset({Role.ATTORNEY}), "/dashboard"),
    )

    def _is_guarded(self, path: str) -> bool:
        return any(path_matches(path, p) for p in self.GUARDED_PREFIXES)

    def _sign_in_redirect(self, request) -> HttpResponseRedirect:
        sign_in = settings.MDM["SIGN_IN_URL"]
        return HttpResponseRedirect(f"{sign_in}?{urlencode({'callbackUrl': request.get_full_path()})}")

    def _is_expired(self, identity: Identity) -> bool:
        now = int(timezone.now().timestamp())
        for deadline in (identity.expires_at, identity.refresh_expires_at):
            if deadline is not None and deadline < now:
                return True
        return False

    def redirect_for(self, path: str, role: Role) -> Optional[str]:
        """
        Where ``role`` must be sent instead of ``path``; None when allowed.
        """
        if path_matches(path, self.DASHBOARD_PREFIX) and role in self.DASHBOARD_BY_ROLE:
            return self.DASHBOARD_BY_ROLE[role]

        for prefixes, allowed, target in self.ROUTE_RULES:
            if any(path_matches(path, p) for p in prefixes):
                return None if role in allowed else target
        return None

    def process_request(self, request):
        request.identity = None

        path = getattr(request, "path", "") or ""
        if not self._is_guarded(path):
            return None

        identity = resolve_identity(request)
        if identity is None or self._is_expired(identity):
            return self._sign_in_redirect(request)

        target = self.redirect_for(path, identity.role)
        if target is not None:
            logger.info("Role %s redirected from %s to %s", identity.role, path, target)
            return HttpResponseRedirect(target)

        request.identity = identity
        return None
