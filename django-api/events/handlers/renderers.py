from rest_framework.renderers import JSONRenderer


class HalJSONRenderer(JSONRenderer):
    """JSON rendered under the HAL media type."""

    media_type = "application/hal+json"
    format = "hal"
