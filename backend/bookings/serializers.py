from django.utils import timezone
from rest_framework import serializers

from tours.localization import normalize_locale

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    tour_id = serializers.IntegerField(read_only=True, allow_null=True)
    party_size = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "adults",
            "children",
            "infants",
            "party_size",
            "travel_date",
            "tour_id",
            "tour_title",
            "locale",
            "pickup_location",
            "pickup_location_outside",
            "message",
            "notes",
            "requirements",
            "total_price",
            "currency",
            "currency_symbol",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Public booking form. Prices are never taken from the client."""

    name = serializers.CharField(min_length=2, max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(min_length=6, max_length=30)
    adults = serializers.IntegerField(min_value=1, max_value=20)
    children = serializers.IntegerField(min_value=0, max_value=20, default=0)
    infants = serializers.IntegerField(min_value=0, max_value=20, default=0)
    travel_date = serializers.DateField()
    tour = serializers.IntegerField(min_value=1, error_messages={"invalid": "Invalid tour id."})
    locale = serializers.CharField(required=False, default="en")
    pickup_location = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    pickup_location_outside = serializers.CharField(
        max_length=200, required=False, allow_blank=True, default=""
    )
    message = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")
    requirements = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    # Accepted for older clients and compared against the server-side total.
    total_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, write_only=True
    )

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate_travel_date(self, value):
        if value < timezone.localdate():
            raise serializers.ValidationError("Travel date must be today or later.")
        return value

    def validate_locale(self, value: str) -> str:
        return normalize_locale(value)


class BookingUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Booking
        fields = ["status", "notes", "pickup_location", "travel_date"]


class BookingStatusSerializer(serializers.ModelSerializer):
    class Meta:
        model = Booking
        fields = ["status"]
        extra_kwargs = {"status": {"required": True}}
