# mdm_core/iam/api/auth.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from mdm_core.iam.api.serializers import (
    DetailResponseSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    SessionResponseSerializer,
    SessionUserSerializer,
)
from mdm_core.iam.auth import get_identity
from mdm_core.iam.services.accounts import AccountService
from mdm_core.iam.session import issue_tokens

logger = logging.getLogger(__name__)


def _seconds(value: Any) -> int:
    """
    Convert a JWT lifetime setting into seconds.
    Supports timedelta or int/float (already seconds).
    """
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    return int(value)


def _set_auth_cookies(response: Response, *, access: str, refresh: str) -> None:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}

    secure = bool(jwt_cfg.get("AUTH_COOKIE_SECURE", False))
    samesite = jwt_cfg.get("AUTH_COOKIE_SAMESITE", "Lax")

    cookies = (
        (jwt_cfg.get("AUTH_COOKIE", "mdm_access"), access, jwt_cfg.get("ACCESS_TOKEN_LIFETIME", timedelta(minutes=30))),
        (jwt_cfg.get("AUTH_COOKIE_REFRESH", "mdm_refresh"), refresh, jwt_cfg.get("REFRESH_TOKEN_LIFETIME", timedelta(days=30))),
    )
    for name, value, lifetime in cookies:
        response.set_cookie(
            name,
            value,
            max_age=_seconds(lifetime),
            httponly=True,
            secure=secure,
            samesite=samesite,
            path="/",
        )


def _clear_auth_cookies(response: Response) -> None:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}
    response.delete_cookie(jwt_cfg.get("AUTH_COOKIE", "mdm_access"), path="/")
    response.delete_cookie(jwt_cfg.get("AUTH_COOKIE_REFRESH", "mdm_refresh"), path="/")


class TokenEndpointView(APIView):
    """
    Login and refresh run without authenticating, so a stale cookie cannot
    block them. The Bearer challenge keeps AuthenticationFailed a 401.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get_authenticate_header(self, request):
        return 'Bearer realm="api"'


class LoginView(TokenEndpointView):
    @extend_schema(
        request=LoginRequestSerializer,
        responses={200: LoginResponseSerializer},
        tags=["IAM"],
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = AccountService.normalize_email(serializer.validated_data["email"])
        user = authenticate(request, username=email, password=serializer.validated_data["password"])
        if user is None:
            logger.info("Failed login attempt")
            raise AuthenticationFailed("Invalid email or password")

        access, refresh = issue_tokens(user)
        update_last_login(None, user)

        res = Response(
            {"user": SessionUserSerializer(user).data, "access": access, "refresh": refresh},
            status=status.HTTP_200_OK,
        )
        _set_auth_cookies(res, access=access, refresh=refresh)
        return res


class RefreshView(TokenEndpointView):
    """
    Re-issues both tokens from the refresh cookie (or body ``refresh``),
    re-reading role and physician link from the database.
    """
    @extend_schema(
        request=None,
        responses={200: DetailResponseSerializer},
        tags=["IAM"],
    )
    def post(self, request):
        jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}
        raw = request.COOKIES.get(jwt_cfg.get("AUTH_COOKIE_REFRESH", "mdm_refresh")) or request.data.get("refresh")
        if not raw:
            raise AuthenticationFailed("Refresh token missing.")

        try:
            token = RefreshToken(raw)
        except TokenError as exc:
            raise InvalidToken(str(exc))

        user = get_user_model().objects.filter(pk=token["user_id"], is_active=True).first()
        if user is None:
            raise AuthenticationFailed("User not found or inactive.")

        access, refresh = issue_tokens(user)
        res = Response({"detail": "refreshed"}, status=status.HTTP_200_OK)
        _set_auth_cookies(res, access=access, refresh=refresh)
        return res


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=None,
        responses={200: DetailResponseSerializer},
        tags=["IAM"],
    )
    def post(self, request):
        res = Response({"detail": "logged out"}, status=status.HTTP_200_OK)
        _clear_auth_cookies(res)
        return res


class SessionView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: SessionResponseSerializer}, tags=["IAM"])
    def get(self, request):
        get_identity(request)
        user = get_user_model().objects.select_related("profile").get(pk=request.user.pk)
        return Response({"user": SessionUserSerializer(user).data})
