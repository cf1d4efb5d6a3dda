from rest_framework import serializers

from tours.localization import is_german, resolve_field
from tours.serializers import request_locale

from .models import Testimonial


class TestimonialSerializer(serializers.ModelSerializer):
    display = serializers.SerializerMethodField()

    class Meta:
        model = Testimonial
        fields = [
            "id",
            "name",
            "country",
            "role",
            "role_de",
            "initials",
            "image",
            "text",
            "text_de",
            "sort_order",
            "is_active",
            "display",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]
        extra_kwargs = {"country": {"min_length": 2}}

    def validate_initials(self, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError("Initials are required.")
        return value

    def get_display(self, obj: Testimonial):
        german = is_german(request_locale(self.context))
        return {
            "role": resolve_field(obj.role, obj.role_de, german),
            "text": resolve_field(obj.text, obj.text_de, german),
        }


class PublicTestimonialSerializer(serializers.ModelSerializer):
    """Visitor submission: no colour, ordering or visibility controls."""

    country = serializers.CharField(min_length=2, max_length=100)

    class Meta:
        model = Testimonial
        fields = ["name", "country", "initials", "text"]

    def validate_initials(self, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError("Initials are required.")
        return value
