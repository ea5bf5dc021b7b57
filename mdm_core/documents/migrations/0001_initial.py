from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Document",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("patient_name", models.CharField(db_index=True, max_length=255)),
                ("dob", models.CharField(blank=True, default="", max_length=32)),
                ("doi", models.CharField(blank=True, default="", max_length=32)),
                ("claim_number", models.CharField(blank=True, db_index=True, default="", max_length=128)),
                ("status", models.CharField(db_index=True, default="pending", max_length=32)),
                ("mode", models.CharField(blank=True, choices=[("wc", "Workers' compensation"), ("gm", "General medicine")], default="", max_length=8)),
                ("file_name", models.CharField(blank=True, default="", max_length=255)),
                ("blob_path", models.CharField(blank=True, default="", max_length=1024)),
                ("gcs_file_link", models.URLField(blank=True, default="", max_length=1024)),
                ("brief_summary", models.TextField(blank=True, default="")),
                ("report_date", models.DateField(blank=True, null=True)),
                ("ur_denial_reason", models.TextField(blank=True, default="")),
                ("physician", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "documents_document",
                "indexes": [
                    models.Index(fields=["physician", "updated_at"], name="doc_physician_updated_idx"),
                    models.Index(fields=["physician", "patient_name", "dob"], name="doc_physician_patient_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="FailDoc",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("reason", models.TextField(blank=True, default="")),
                ("file_name", models.CharField(blank=True, default="", max_length=255)),
                ("blob_path", models.CharField(blank=True, default="", max_length=1024)),
                ("gcs_file_link", models.URLField(blank=True, default="", max_length=1024)),
                ("patient_name", models.CharField(blank=True, default="", max_length=255)),
                ("claim_number", models.CharField(blank=True, default="", max_length=128)),
                ("dob", models.CharField(blank=True, default="", max_length=32)),
                ("doi", models.CharField(blank=True, default="", max_length=32)),
                ("physician", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "documents_fail_doc",
                "indexes": [
                    models.Index(fields=["physician", "created_at"], name="faildoc_physician_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="SummarySnapshot",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("dx", models.TextField(blank=True, default="")),
                ("key_concern", models.TextField(blank=True, default="")),
                ("next_step", models.TextField(blank=True, default="")),
                ("document", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="summary_snapshot", to="documents.document")),
            ],
            options={"db_table": "documents_summary_snapshot"},
        ),
        migrations.CreateModel(
            name="Adl",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("adls_affected", models.TextField(blank=True, default="")),
                ("work_restrictions", models.TextField(blank=True, default="")),
                ("document", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="adl", to="documents.document")),
            ],
            options={"db_table": "documents_adl"},
        ),
        migrations.CreateModel(
            name="DocumentSummary",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("summary_type", models.CharField(blank=True, default="", max_length=128)),
                ("date", models.DateField(blank=True, null=True)),
                ("summary", models.TextField(blank=True, default="")),
                ("document", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="document_summary", to="documents.document")),
            ],
            options={"db_table": "documents_document_summary"},
        ),
    ]
