# mdm_core/documents/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from mdm_core.documents.models import Adl, Document, DocumentSummary, FailDoc, SummarySnapshot


class SummarySnapshotSerializer(serializers.ModelSerializer):
    keyConcern = serializers.CharField(source="key_concern")
    nextStep = serializers.CharField(source="next_step")

    class Meta:
        model = SummarySnapshot
        fields = ["id", "dx", "keyConcern", "nextStep"]


class AdlSerializer(serializers.ModelSerializer):
    adlsAffected = serializers.CharField(source="adls_affected")
    workRestrictions = serializers.CharField(source="work_restrictions")

    class Meta:
        model = Adl
        fields = ["id", "adlsAffected", "workRestrictions"]


class DocumentSummarySerializer(serializers.ModelSerializer):
    type = serializers.CharField(source="summary_type")

    class Meta:
        model = DocumentSummary
        fields = ["id", "type", "date", "summary"]


class DocumentSerializer(serializers.ModelSerializer):
    """Full document with its extraction satellites."""
    patientName = serializers.CharField(source="patient_name")
    claimNumber = serializers.CharField(source="claim_number")
    physicianId = serializers.IntegerField(source="physician_id", read_only=True)
    fileName = serializers.CharField(source="file_name")
    blobPath = serializers.CharField(source="blob_path")
    gcsFileLink = serializers.CharField(source="gcs_file_link")
    briefSummary = serializers.CharField(source="brief_summary")
    reportDate = serializers.DateField(source="report_date", allow_null=True)
    urDenialReason = serializers.CharField(source="ur_denial_reason")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    summarySnapshot = SummarySnapshotSerializer(source="summary_snapshot", read_only=True)
    adl = AdlSerializer(read_only=True)
    documentSummary = DocumentSummarySerializer(source="document_summary", read_only=True)

    class Meta:
        model = Document
        fields = [
            "id",
            "patientName",
            "dob",
            "doi",
            "claimNumber",
            "status",
            "mode",
            "physicianId",
            "fileName",
            "blobPath",
            "gcsFileLink",
            "briefSummary",
            "reportDate",
            "urDenialReason",
            "createdAt",
            "updatedAt",
            "summarySnapshot",
            "adl",
            "documentSummary",
        ]


class DocumentBriefSerializer(serializers.ModelSerializer):
    """Narrow projection for document pickers."""
    patientName = serializers.CharField(source="patient_name")
    claimNumber = serializers.CharField(source="claim_number")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Document
        fields = ["id", "patientName", "dob", "doi", "claimNumber", "status", "createdAt"]


class FailDocSerializer(serializers.ModelSerializer):
    fileName = serializers.CharField(source="file_name")
    blobPath = serializers.CharField(source="blob_path")
    gcsFileLink = serializers.CharField(source="gcs_file_link")
    patientName = serializers.CharField(source="patient_name")
    claimNumber = serializers.CharField(source="claim_number")
    physicianId = serializers.IntegerField(source="physician_id")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = FailDoc
        fields = [
            "id",
            "reason",
            "fileName",
            "blobPath",
            "gcsFileLink",
            "patientName",
            "claimNumber",
            "dob",
            "doi",
            "physicianId",
            "createdAt",
        ]


class DocumentUpdateSerializer(serializers.Serializer):
    patientName = serializers.CharField(required=False, allow_blank=True, default="")
    claimNumber = serializers.CharField(required=False, allow_blank=True, default="")
    dob = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    doi = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class OriginalPatientSerializer(serializers.Serializer):
    patientName = serializers.CharField()
    dob = serializers.CharField(allow_blank=True)


class UpdatedPatientSerializer(serializers.Serializer):
    patientName = serializers.CharField(required=False, allow_blank=True)
    dob = serializers.CharField(required=False, allow_blank=True)
    doi = serializers.CharField(required=False, allow_blank=True)
    claimNumber = serializers.CharField(required=False, allow_blank=True)


class PatientUpdateSerializer(serializers.Serializer):
    originalPatient = OriginalPatientSerializer()
    updatedData = UpdatedPatientSerializer()
