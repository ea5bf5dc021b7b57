# mdm_core/iam/api/serializers.py
from __future__ import annotations

from rest_framework import serializers


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)


class SessionUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    role = serializers.CharField(source="profile.role")
    physicianId = serializers.IntegerField(source="profile.physician_id", allow_null=True)
    image = serializers.CharField(source="profile.image")


class SessionResponseSerializer(serializers.Serializer):
    user = SessionUserSerializer()


class LoginResponseSerializer(serializers.Serializer):
    user = SessionUserSerializer()
    access = serializers.CharField()
    refresh = serializers.CharField()


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()


class StaffSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    email = serializers.EmailField()
    role = serializers.CharField(source="profile.role")
    image = serializers.CharField(source="profile.image")


class StaffCreateSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=150)
    lastName = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, trim_whitespace=False)
    phoneNumber = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")


class StaffListResponseSerializer(serializers.Serializer):
    staff = StaffSerializer(many=True)


class AssigneesResponseSerializer(serializers.Serializer):
    assignees = serializers.ListField(child=serializers.CharField())
    count = serializers.IntegerField()
