from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "events"
    verbose_name = "Events"
