from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("begin_enrollment_at", models.DateTimeField()),
                ("close_enrollment_at", models.DateTimeField()),
                ("begin_event_at", models.DateTimeField()),
                ("end_event_at", models.DateTimeField()),
                (
                    "location",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("base_price", models.PositiveIntegerField(default=0)),
                ("max_price", models.PositiveIntegerField(default=0)),
                ("limit_of_enrollment", models.PositiveIntegerField(default=0)),
                ("free", models.BooleanField(default=False)),
                ("offline", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published")],
                        default="DRAFT",
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["name"], name="events_event_name_idx"),
                    models.Index(
                        fields=["begin_event_at"], name="events_event_begin_at_idx"
                    ),
                ],
            },
        ),
    ]
