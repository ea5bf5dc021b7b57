from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WorkflowStats",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("date", models.DateField(db_index=True)),
                ("referrals_processed", models.PositiveIntegerField(default=0)),
                ("rfas_monitored", models.PositiveIntegerField(default=0)),
                ("qme_upcoming", models.PositiveIntegerField(default=0)),
                ("payer_disputes", models.PositiveIntegerField(default=0)),
                ("external_docs", models.PositiveIntegerField(default=0)),
                ("intakes_created", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "dashboard_workflow_stats",
                "verbose_name_plural": "workflow stats",
            },
        ),
    ]
