# mdm_core/iam/admin.py
from __future__ import annotations

from django.contrib import admin

from mdm_core.iam.models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "role", "physician", "created_at", "updated_at")
    list_filter = ("role",)
    search_fields = ("user__username", "user__email", "physician__email")
    raw_id_fields = ("user", "physician")
    ordering = ("-created_at",)
