import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("held_on", models.DateField()),
                ("name", models.CharField(max_length=512)),
                ("number_of_seats", models.PositiveIntegerField(default=20)),
                (
                    "status",
                    models.CharField(
                        choices=[("open", "Open"), ("closed", "Closed")],
                        default="open",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "events",
                "ordering": ["held_on", "name"],
                "indexes": [
                    models.Index(
                        fields=["status", "held_on"],
                        name="events_status_held_on_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("held_on", "name"), name="events_uk"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("email", models.EmailField(max_length=254)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("position", models.PositiveIntegerField()),
                ("registered_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrations",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "db_table": "registrations",
                "ordering": ["position"],
                "indexes": [
                    models.Index(
                        fields=["event", "position"],
                        name="registrations_event_pos_idx",
                    )
                ],
            },
        ),
    ]
