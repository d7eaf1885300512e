"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/rules.py.
"""

from django.db import models

from events.domain.models import EventStatus


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        DRAFT = EventStatus.DRAFT.value
        PUBLISHED = EventStatus.PUBLISHED.value

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255)
    description = models.TextField()
    begin_enrollment_at = models.DateTimeField()
    close_enrollment_at = models.DateTimeField()
    begin_event_at = models.DateTimeField()
    end_event_at = models.DateTimeField()
    location = models.CharField(max_length=255, blank=True, null=True)
    base_price = models.PositiveIntegerField(default=0)
    max_price = models.PositiveIntegerField(default=0)
    limit_of_enrollment = models.PositiveIntegerField(default=0)
    free = models.BooleanField(default=False)
    offline = models.BooleanField(default=False)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.DRAFT
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="events_event_name_idx"),
            models.Index(fields=["begin_event_at"], name="events_event_begin_at_idx"),
        ]

    def __str__(self) -> str:
        return self.name
