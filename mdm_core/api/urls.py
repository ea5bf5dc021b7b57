# mdm_core/api/urls.py
from __future__ import annotations

from django.urls import path

from mdm_core.dashboard.api.views import RecommendationView, SearchPatientView, WorkflowStatsView
from mdm_core.documents.api.views import (
    FailedDocumentsView,
    PatientDetailView,
    PatientDocumentsView,
    PatientListView,
    PatientUpdateView,
    RecentPatientsView,
    UpdateDocumentView,
    VerifyDocumentView,
)
from mdm_core.iam.api.auth import LoginView, LogoutView, RefreshView, SessionView
from mdm_core.iam.api.staff import AssigneesView, StaffView
from mdm_core.tasks.api.views import ManualTaskCreateView, OfficePulseView, TaskDetailView, TaskListView

urlpatterns = [
    # Auth
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/refresh", RefreshView.as_view(), name="auth-refresh"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/session", SessionView.as_view(), name="auth-session"),

    # Documents / patients
    path("get-patient", PatientListView.as_view(), name="patient-list"),
    path("get-patient/<uuid:document_id>", PatientDetailView.as_view(), name="patient-detail"),
    path("patient-documents", PatientDocumentsView.as_view(), name="patient-documents"),
    path("get-recent-patients", RecentPatientsView.as_view(), name="recent-patients"),
    path("get-failed-document", FailedDocumentsView.as_view(), name="failed-documents"),
    path("update-document", UpdateDocumentView.as_view(), name="update-document"),
    path("verify-document", VerifyDocumentView.as_view(), name="verify-document"),
    path("patients/update", PatientUpdateView.as_view(), name="patient-update"),

    # Dashboard
    path("dashboard/recommendation", RecommendationView.as_view(), name="dashboard-recommendation"),
    path("dashboard/search-patient", SearchPatientView.as_view(), name="dashboard-search-patient"),
    path("workflow-stats", WorkflowStatsView.as_view(), name="workflow-stats"),

    # Tasks
    path("add-manual-task", ManualTaskCreateView.as_view(), name="add-manual-task"),
    path("tasks", TaskListView.as_view(), name="task-list"),
    path("tasks/<uuid:task_id>", TaskDetailView.as_view(), name="task-detail"),
    path("office-pulse", OfficePulseView.as_view(), name="office-pulse"),

    # Staff
    path("staff", StaffView.as_view(), name="staff"),
    path("assignees", AssigneesView.as_view(), name="assignees"),
]
