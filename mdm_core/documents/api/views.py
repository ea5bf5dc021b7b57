# mdm_core/documents/api/views.py
from __future__ import annotations

from uuid import UUID

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from mdm_core.audit.services import AuditService
from mdm_core.common.api.pagination import PageLimitPagination
from mdm_core.documents.api.serializers import (
    DocumentBriefSerializer,
    DocumentSerializer,
    DocumentUpdateSerializer,
    FailDocSerializer,
    PatientUpdateSerializer,
)
from mdm_core.documents.models import Document
from mdm_core.documents.selectors import (
    failed_documents,
    get_document,
    latest_documents,
    list_documents,
    recent_patients,
)
from mdm_core.documents.services import DocumentService
from mdm_core.iam.auth import require_owner


def _parse_uuid(value: str, field_name: str) -> UUID:
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise DRFValidationError({"detail": f"Invalid {field_name}"})


class PatientListView(APIView):
    """
    Paginated document list for one physician.
    The requested physicianId must be the caller's own tenant.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter("physicianId", int, required=True),
            OpenApiParameter("page", int),
            OpenApiParameter("limit", int),
            OpenApiParameter("search", str),
            OpenApiParameter("status", str),
        ],
        tags=["Documents"],
    )
    def get(self, request):
        identity, owner_id = require_owner(request)

        raw = (request.query_params.get("physicianId") or "").strip()
        if not raw:
            raise DRFValidationError({"detail": "Physician ID is required"})
        try:
            requested_id = int(raw)
        except ValueError:
            raise DRFValidationError({"detail": "Invalid physicianId"})
        if requested_id != owner_id:
            raise PermissionDenied("Access denied for this physician")

        qs = list_documents(physician_id=owner_id, params=request.query_params)
        paginator = PageLimitPagination()
        docs = paginator.paginate_queryset(qs, request, view=self)
        data = DocumentSerializer(docs, many=True).data

        AuditService.record_request(request, identity, f"Listed patient documents (page {paginator.page_index})")
        return paginator.get_paginated_response(data)


class PatientDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: DocumentSerializer}, tags=["Documents"])
    def get(self, request, document_id: UUID):
        identity, owner_id = require_owner(request)
        try:
            doc = get_document(physician_id=owner_id, document_id=document_id)
        except Document.DoesNotExist:
            raise NotFound("Document not found")

        AuditService.record_request(request, identity, f"Viewed document {doc.id}")
        return Response(DocumentSerializer(doc).data, status=status.HTTP_200_OK)


class PatientDocumentsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: DocumentBriefSerializer(many=True)}, tags=["Documents"])
    def get(self, request):
        identity, owner_id = require_owner(request)
        docs = latest_documents(physician_id=owner_id)

        AuditService.record_request(request, identity, "Listed latest patient documents")
        return Response({"documents": DocumentBriefSerializer(docs, many=True).data})


class RecentPatientsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(parameters=[OpenApiParameter("mode", str)], tags=["Documents"])
    def get(self, request):
        identity, owner_id = require_owner(request)
        mode = (request.query_params.get("mode") or "").strip() or None
        patients = recent_patients(physician_id=owner_id, mode=mode)

        AuditService.record_request(request, identity, "Accessed recent patients")
        return Response(patients, status=status.HTTP_200_OK)


class FailedDocumentsView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: FailDocSerializer(many=True)}, tags=["Documents"])
    def get(self, request):
        _, owner_id = require_owner(request)
        docs, total = failed_documents(physician_id=owner_id)
        if total == 0:
            return Response({"message": "No failed documents found", "documents": [], "totalDocuments": 0})
        return Response({"totalDocuments": total, "documents": FailDocSerializer(docs, many=True).data})


class UpdateDocumentView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=DocumentUpdateSerializer,
        parameters=[OpenApiParameter("documentId", str, required=True)],
        tags=["Documents"],
    )
    def patch(self, request):
        identity, owner_id = require_owner(request)

        raw_id = request.query_params.get("documentId")
        if not raw_id:
            raise DRFValidationError({"detail": "Document ID is required"})
        document_id = _parse_uuid(raw_id, "documentId")

        ser = DocumentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            doc = DocumentService.update_document(
                physician_id=owner_id,
                document_id=document_id,
                patient_name=data["patientName"],
                claim_number=data["claimNumber"],
                dob=data.get("dob") or None,
                doi=data.get("doi") or None,
            )
        except Document.DoesNotExist:
            raise NotFound("Document not found")
        except ValueError as e:
            raise DRFValidationError({"detail": str(e)})

        AuditService.record_request(request, identity, f"Updated document {doc.id}")
        return Response({"success": True, "document": DocumentSerializer(doc).data})


class VerifyDocumentView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=None,
        parameters=[
            OpenApiParameter("patient_name", str, required=True),
            OpenApiParameter("dob", str),
            OpenApiParameter("doi", str),
        ],
        tags=["Documents"],
    )
    def post(self, request):
        identity, owner_id = require_owner(request)

        params = request.query_params
        patient_name = (params.get("patient_name") or "").strip()
        if not patient_name:
            raise DRFValidationError({"detail": "Patient name is required"})

        count = DocumentService.verify_documents(
            physician_id=owner_id,
            patient_name=patient_name,
            dob=(params.get("dob") or "").strip() or None,
            doi=(params.get("doi") or "").strip() or None,
        )

        if count == 0:
            raise NotFound(f"No documents found to verify for patient: {patient_name}")

        AuditService.record_request(request, identity, f"Verified {count} document(s) for {patient_name}")
        return Response(
            {"success": True, "message": f"Successfully verified {count} document(s)", "count": count},
            status=status.HTTP_200_OK,
        )


class PatientUpdateView(APIView):
    """
    Edits a patient's identity across all of the tenant's documents.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(request=PatientUpdateSerializer, tags=["Documents"])
    def post(self, request):
        identity, owner_id = require_owner(request)

        ser = PatientUpdateSerializer(data=request.data)
        if not ser.is_valid():
            raise DRFValidationError({"detail": "originalPatient and updatedData are required", **ser.errors})
        original = ser.validated_data["originalPatient"]
        updated = ser.validated_data["updatedData"]

        try:
            count = DocumentService.update_patient(
                physician_id=owner_id,
                original_name=original["patientName"],
                original_dob=original["dob"],
                updated=updated,
            )
        except ValueError as e:
            raise DRFValidationError({"detail": str(e)})

        if count == 0:
            raise NotFound("No documents found for this patient")

        patient = {
            "patientName": updated.get("patientName") or original["patientName"],
            "dob": updated.get("dob") or original["dob"],
            "doi": updated.get("doi") or None,
            "claimNumber": updated.get("claimNumber") or None,
        }
        AuditService.record_request(request, identity, f"Updated patient {original['patientName']} on {count} document(s)")
        return Response(
            {
                "success": True,
                "message": f"Updated {count} document(s)",
                "updatedCount": count,
                "patient": patient,
            },
            status=status.HTTP_200_OK,
        )
