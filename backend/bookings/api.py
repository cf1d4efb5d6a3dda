from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from accounts.permissions import IsAdmin
from core.pagination import validated_list_query

from .filters import BookingFilter, BookingListQuery
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    BookingUpdateSerializer,
)
from .services.submissions import create_booking


class BookingViewSet(viewsets.ModelViewSet):
    """Public booking submission plus the back-office booking desk."""

    queryset = Booking.objects.all()
    serializer_class = BookingSerializer
    permission_classes = [IsAdmin]
    filterset_class = BookingFilter
    lookup_value_regex = r"[0-9]+"

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return super().get_permissions()

    def filter_queryset(self, queryset):
        if self.action != "list":
            return queryset
        return super().filter_queryset(queryset)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        page = validated_list_query(BookingListQuery, request).paginate(queryset)
        return Response(
            {
                "bookings": BookingSerializer(page.items, many=True).data,
                "pagination": page.meta(),
            }
        )

    def create(self, request, *args, **kwargs):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = create_booking(serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        booking = self.get_object()
        serializer = BookingUpdateSerializer(booking, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(BookingSerializer(booking).data)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        booking = self.get_object()
        serializer = BookingStatusSerializer(booking, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(BookingSerializer(booking).data)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"message": "Booking deleted successfully."})
