"""Serializers between the JSON wire format and domain models.

Wire names are camelCase; ``source`` maps them onto the snake_case
attributes of the domain dataclasses.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from rest_framework import serializers
from rest_framework.exceptions import ErrorDetail
from rest_framework.settings import api_settings

from events.domain import EventSubmission, ValidationError
from events.domain.errors import SUBMISSION_OBJECT
from events.domain.value_objects import INT32_MAX


class EventSubmissionSerializer(serializers.Serializer):
    """Shape and type checks for an incoming submission.

    Properties the client may not set (``id``, ``free``, ``eventStatus``...)
    are rejected rather than ignored.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    beginEnrollmentAt = serializers.DateTimeField(source="begin_enrollment_at")
    closeEnrollmentAt = serializers.DateTimeField(source="close_enrollment_at")
    beginEventAt = serializers.DateTimeField(source="begin_event_at")
    endEventAt = serializers.DateTimeField(source="end_event_at")
    location = serializers.CharField(
        max_length=255, allow_null=True, allow_blank=True, default=None
    )
    basePrice = serializers.IntegerField(
        source="base_price", min_value=0, max_value=INT32_MAX
    )
    maxPrice = serializers.IntegerField(
        source="max_price", min_value=0, max_value=INT32_MAX
    )
    limitOfEnrollment = serializers.IntegerField(
        source="limit_of_enrollment", min_value=0, max_value=INT32_MAX
    )

    def to_internal_value(self, data: Any) -> dict[str, Any]:
        errors: dict[str, Any] = {}
        value: dict[str, Any] = {}
        try:
            value = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            errors.update(exc.detail)
        if isinstance(data, Mapping):
            for name in sorted(set(data) - set(self.fields)):
                errors[name] = [ErrorDetail("Unknown property.", code="unknownField")]
        if errors:
            raise serializers.ValidationError(errors)
        return value

    def to_submission(self) -> EventSubmission:
        return EventSubmission(**self.validated_data)

    def collect_errors(self) -> list[ValidationError]:
        """Flatten ``self.errors`` into domain validation errors, fields first."""
        submitted = self.initial_data if isinstance(self.initial_data, Mapping) else {}
        field_errors, global_errors = [], []
        for name, details in self.errors.items():
            if not isinstance(details, list):
                details = [details]
            for detail in details:
                code = getattr(detail, "code", None) or "invalid"
                if name == api_settings.NON_FIELD_ERRORS_KEY:
                    global_errors.append(
                        ValidationError(
                            object_name=SUBMISSION_OBJECT,
                            code=code,
                            message=str(detail),
                        )
                    )
                else:
                    field_errors.append(
                        ValidationError(
                            object_name=SUBMISSION_OBJECT,
                            code=code,
                            message=str(detail),
                            field=name,
                            rejected_value=submitted.get(name),
                        )
                    )
        return field_errors + global_errors


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    beginEnrollmentAt = serializers.DateTimeField(source="begin_enrollment_at")
    closeEnrollmentAt = serializers.DateTimeField(source="close_enrollment_at")
    beginEventAt = serializers.DateTimeField(source="begin_event_at")
    endEventAt = serializers.DateTimeField(source="end_event_at")
    location = serializers.CharField(allow_null=True)
    basePrice = serializers.IntegerField(source="base_price.amount")
    maxPrice = serializers.IntegerField(source="max_price.amount")
    limitOfEnrollment = serializers.IntegerField(source="limit_of_enrollment.value")
    free = serializers.BooleanField()
    offline = serializers.BooleanField()
    eventStatus = serializers.CharField(source="status.value")


class ValidationErrorSerializer(serializers.Serializer):
    """Serializer for a reported validation error.

    ``field`` and ``rejectedValue`` are omitted for global errors.
    """

    field = serializers.CharField(required=False)
    objectName = serializers.CharField(source="object_name")
    code = serializers.CharField()
    defaultMessage = serializers.CharField(source="message")

    def to_representation(self, instance: ValidationError) -> dict[str, Any]:
        data = super().to_representation(instance)
        if instance.field is None:
            data.pop("field", None)
        if instance.rejected_value is not None:
            rejected = instance.rejected_value
            if isinstance(rejected, datetime):
                rejected = rejected.isoformat()
            data["rejectedValue"] = str(rejected)
        return data
