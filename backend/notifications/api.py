from django.conf import settings
from django.http import StreamingHttpResponse
from rest_framework.views import APIView

from accounts.permissions import IsAdmin
from core.renderers import EnvelopeJSONRenderer

from .broker import NotificationStream, broker
from .renderers import EventStreamRenderer


class NotificationStreamView(APIView):
    """Push new bookings and reviews to the back office as server-sent events."""

    permission_classes = [IsAdmin]
    renderer_classes = [EnvelopeJSONRenderer, EventStreamRenderer]

    def get(self, request, *args, **kwargs):
        stream = NotificationStream(
            broker.subscribe(),
            keepalive_seconds=settings.NOTIFICATIONS_KEEPALIVE_SECONDS,
            retry_ms=settings.NOTIFICATIONS_RETRY_MS,
        )
        response = StreamingHttpResponse(stream, content_type="text/event-stream")
        response["Cache-Control"] = "no-cache, no-transform"
        response["X-Accel-Buffering"] = "no"
        return response
