from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import mdm_core.tasks.models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("documents", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Task",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("description", models.TextField()),
                ("department", models.CharField(db_index=True, max_length=128)),
                ("patient", models.CharField(max_length=255)),
                ("status", models.CharField(choices=[("Pending", "Pending"), ("In Progress", "In Progress"), ("Done", "Done"), ("Completed", "Completed"), ("Closed", "Closed")], db_index=True, default="Pending", max_length=32)),
                ("actions", models.JSONField(blank=True, default=mdm_core.tasks.models.default_actions)),
                ("due_date", models.DateTimeField(blank=True, db_index=True, null=True)),
                ("document", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tasks", to="documents.document")),
                ("physician", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "tasks_task",
                "indexes": [
                    models.Index(fields=["physician", "status", "due_date"], name="task_physician_status_due_idx"),
                    models.Index(fields=["physician", "department"], name="task_physician_dept_idx"),
                ],
            },
        ),
    ]
