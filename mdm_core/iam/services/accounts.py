# mdm_core/iam/services/accounts.py
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from mdm_core.common.api.exceptions import ConflictError
from mdm_core.iam.models import Role, UserProfile

logger = logging.getLogger(__name__)


class AccountService:
    @staticmethod
    def normalize_email(email: str) -> str:
        return (email or "").strip().lower()

    @staticmethod
    @transaction.atomic
    def create_user(
        *,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: Role,
        physician_id: Optional[int] = None,
        phone_number: str = "",
        image: str = "",
    ):
        """
        Creates a login (username == normalized email) plus its role profile.
        Raises ConflictError when the email is already registered.
        """
        User = get_user_model()
        email = AccountService.normalize_email(email)
        role = Role(role)

        if User.objects.filter(username=email).exists():
            raise ConflictError("User with this email already exists")

        user = User.objects.create_user(
            username=email,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
        )
        UserProfile.objects.create(
            user=user,
            role=role,
            physician_id=physician_id,
            phone_number=phone_number,
            image=image,
        )
        logger.info("Created %s account %s", role, user.pk)
        return user

    @staticmethod
    def create_staff(
        *,
        physician_id: int,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        phone_number: str = "",
    ):
        """
        Adds a Staff account linked to ``physician_id``.
        """
        return AccountService.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            role=Role.STAFF,
            physician_id=physician_id,
            phone_number=phone_number,
        )
