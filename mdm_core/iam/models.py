# mdm_core/iam/models.py
from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    PHYSICIAN = "Physician", "Physician"
    STAFF = "Staff", "Staff"
    ATTORNEY = "Attorney", "Attorney"


class UserProfile(models.Model):
    """
    Role and tenant link anchored to Django's AUTH_USER_MODEL.

    A Physician account is its own tenant. Staff and Attorney accounts point
    at the physician whose data they work on; a missing link is a
    configuration error surfaced at request time, not at save time.
    """
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=Role.choices, db_index=True)

    physician = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="linked_profiles",
    )

    image = models.URLField(max_length=500, blank=True, default="")
    phone_number = models.CharField(max_length=32, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "iam_user_profile"
        indexes = [
            models.Index(fields=["physician", "role"], name="iam_profile_physician_role_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user.email} ({self.role})"
