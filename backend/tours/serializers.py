from django.db import models
from rest_framework import serializers

from core.exceptions import Conflict

from .localization import localize_tour, normalize_locale
from .models import Tour, generate_slug
from .pricing import resolve_price

# Optional text columns; an explicit null in a write clears them to "".
CLEARABLE_TEXT_FIELDS = frozenset(
    field.name
    for field in Tour._meta.get_fields()
    if isinstance(field, (models.CharField, models.TextField)) and field.blank
)
CLEARABLE_LIST_FIELDS = frozenset({"highlights", "highlights_de"})


def request_locale(context) -> str:
    request = context.get("request")
    if request is not None:
        return normalize_locale(request.query_params.get("locale"))
    return normalize_locale(context.get("locale"))


class TourSerializer(serializers.ModelSerializer):
    highlights = serializers.ListField(
        child=serializers.CharField(max_length=300, allow_blank=True), required=False
    )
    highlights_de = serializers.ListField(
        child=serializers.CharField(max_length=300, allow_blank=True), required=False
    )
    display = serializers.SerializerMethodField()
    pricing = serializers.SerializerMethodField()

    class Meta:
        model = Tour
        fields = "__all__"
        read_only_fields = ["previous_slugs", "created_at", "updated_at"]
        extra_kwargs = {
            "title": {"min_length": 3},
            "description": {"min_length": 10},
            "slug": {"required": False, "allow_blank": True, "validators": []},
        }

    def to_internal_value(self, data):
        if hasattr(data, "items"):
            cleaned = {}
            for key, value in data.items():
                if value is None and key in CLEARABLE_TEXT_FIELDS:
                    value = ""
                elif value is None and key in CLEARABLE_LIST_FIELDS:
                    value = []
                cleaned[key] = value
            data = cleaned
        return super().to_internal_value(data)

    def validate_slug(self, value: str) -> str:
        return value.strip().lower()

    def validate(self, attrs):
        if "slug" in attrs or self.instance is None:
            slug = attrs.get("slug") or generate_slug(attrs.get("title") or getattr(self.instance, "title", ""))
            if not slug:
                raise serializers.ValidationError({"slug": "Could not derive a slug from the title."})
            taken = Tour.objects.filter(slug=slug)
            if self.instance is not None:
                taken = taken.exclude(pk=self.instance.pk)
            if taken.exists():
                raise Conflict("Tour with this slug already exists.")
            attrs["slug"] = slug
        return attrs

    def get_display(self, obj: Tour):
        return localize_tour(obj, request_locale(self.context))

    def get_pricing(self, obj: Tour):
        return resolve_price(obj, request_locale(self.context)).as_dict()


class TourSummarySerializer(TourSerializer):
    class Meta(TourSerializer.Meta):
        fields = [
            "id",
            "slug",
            "title",
            "title_de",
            "category",
            "travel_type",
            "primary_location",
            "image1",
            "price",
            "price_eur",
            "on_sale",
            "discount",
            "highlights",
            "highlights_de",
            "display",
            "pricing",
        ]


class BookingQuoteRequestSerializer(serializers.Serializer):
    locale = serializers.CharField(required=False, allow_blank=True, default="en")
    adults = serializers.IntegerField(min_value=1, max_value=20, default=1)
    children = serializers.IntegerField(min_value=0, max_value=20, default=0)
    infants = serializers.IntegerField(min_value=0, max_value=20, default=0)

    def validate_locale(self, value):
        return normalize_locale(value)
