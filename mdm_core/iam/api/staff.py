# mdm_core/iam/api/staff.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from mdm_core.iam.api.serializers import (
    AssigneesResponseSerializer,
    StaffCreateSerializer,
    StaffListResponseSerializer,
    StaffSerializer,
)
from mdm_core.iam.auth import require_owner
from mdm_core.iam.models import Role
from mdm_core.iam.selectors import assignee_options, roster_for_physician
from mdm_core.iam.services.accounts import AccountService


class StaffView(APIView):
    """
    GET  -> staff roster of the caller's physician
    POST -> physician adds a staff account linked to themselves
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: StaffListResponseSerializer}, tags=["Staff"])
    def get(self, request):
        _, physician_id = require_owner(request)
        staff = roster_for_physician(physician_id=physician_id)
        return Response({"staff": StaffSerializer(staff, many=True).data})

    @extend_schema(request=StaffCreateSerializer, responses={201: StaffSerializer}, tags=["Staff"])
    def post(self, request):
        _, physician_id = require_owner(request, allow=frozenset({Role.PHYSICIAN}))

        ser = StaffCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        user = AccountService.create_staff(
            physician_id=physician_id,
            email=data["email"],
            password=data["password"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            phone_number=data.get("phoneNumber", ""),
        )
        return Response(StaffSerializer(user).data, status=status.HTTP_201_CREATED)


class AssigneesView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: AssigneesResponseSerializer}, tags=["Staff"])
    def get(self, request):
        _, physician_id = require_owner(request)
        assignees = assignee_options(physician_id=physician_id)
        return Response({"assignees": assignees, "count": len(assignees)})
