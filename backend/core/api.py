import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthView(APIView):
    """Report whether the API can reach its database."""

    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, *args, **kwargs):
        try:
            connection.ensure_connection()
        except DatabaseError as exc:
            logger.error("Health check failed: %s", exc)
            return Response(
                {"success": False, "status": "unhealthy", "error": "Database connection failed"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(
            {
                "status": "healthy",
                "timestamp": timezone.now().isoformat(),
                "database": "connected",
            }
        )
