# mdm_core/dashboard/api/views.py
from __future__ import annotations

from django.utils import timezone
from django.utils.dateparse import parse_date
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from mdm_core.audit.services import AuditService
from mdm_core.dashboard.api.serializers import (
    DocumentWithAlertsSerializer,
    RecommendationResponseSerializer,
    WorkflowStatsResponseSerializer,
)
from mdm_core.dashboard.selectors import search_patient_documents, workflow_stats_for
from mdm_core.documents.selectors import patient_suggestions
from mdm_core.iam.auth import get_identity, require_owner

PATIENT_QUERY_PARAMS = [
    OpenApiParameter("patientName", str),
    OpenApiParameter("claimNumber", str),
]


def _patient_terms(request) -> tuple[str, str]:
    name = (request.query_params.get("patientName") or "").strip()
    claim = (request.query_params.get("claimNumber") or "").strip()
    if not name and not claim:
        raise DRFValidationError({"detail": "patientName or claimNumber is required"})
    return name, claim


def _describe(name: str, claim: str) -> str:
    parts = []
    if name:
        parts.append(f"name '{name}'")
    if claim:
        parts.append(f"claim '{claim}'")
    return " or ".join(parts)


class RecommendationView(APIView):
    """Type-ahead suggestions for the patient search box."""
    permission_classes = [IsAuthenticated]

    @extend_schema(parameters=PATIENT_QUERY_PARAMS, responses={200: RecommendationResponseSerializer}, tags=["Dashboard"])
    def get(self, request):
        identity, owner_id = require_owner(request)
        name, claim = _patient_terms(request)

        suggestions = patient_suggestions(physician_id=owner_id, patient_name=name, claim_number=claim)
        AuditService.record_request(request, identity, f"Requested patient recommendations for {_describe(name, claim)}")

        if not suggestions["patientNames"] and not suggestions["claimNumbers"]:
            raise NotFound("No matching patients found")
        return Response({"success": True, "data": suggestions}, status=status.HTTP_200_OK)


class SearchPatientView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(parameters=PATIENT_QUERY_PARAMS, responses={200: DocumentWithAlertsSerializer(many=True)}, tags=["Dashboard"])
    def get(self, request):
        identity, owner_id = require_owner(request)
        name, claim = _patient_terms(request)

        docs = list(search_patient_documents(physician_id=owner_id, patient_name=name, claim_number=claim))
        AuditService.record_request(request, identity, f"Searched patient documents for {_describe(name, claim)}")

        if not docs:
            raise NotFound("No documents found for this patient")
        return Response(
            {"success": True, "data": DocumentWithAlertsSerializer(docs, many=True).data},
            status=status.HTTP_200_OK,
        )


class WorkflowStatsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(parameters=[OpenApiParameter("date", str)], responses={200: WorkflowStatsResponseSerializer}, tags=["Dashboard"])
    def get(self, request):
        get_identity(request)

        raw = (request.query_params.get("date") or "").strip()
        if raw:
            try:
                day = parse_date(raw)
            except ValueError:
                day = None
            if day is None:
                raise DRFValidationError({"detail": "date must be YYYY-MM-DD"})
        else:
            day = timezone.localdate()

        return Response({"success": True, "data": workflow_stats_for(day)}, status=status.HTTP_200_OK)
