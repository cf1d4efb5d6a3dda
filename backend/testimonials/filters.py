from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied

from accounts.permissions import is_admin_request
from core.pagination import ListQuerySerializer


class TestimonialListQuery(ListQuerySerializer):
    sort_fields = {"createdAt": "created_at", "sortOrder": "sort_order"}
    default_limit = 50
    default_sort_by = "sortOrder"
    default_sort_order = "asc"

    isActive = serializers.ChoiceField(choices=["true", "false", "all"], required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        attrs.setdefault("isActive", "true")
        return attrs

    def check_access(self, request):
        if self.validated_data["isActive"] != "true" and not is_admin_request(request):
            raise PermissionDenied("Only admins can list hidden testimonials.")

    def filter(self, queryset):
        visibility = self.validated_data["isActive"]
        if visibility == "all":
            return queryset
        return queryset.filter(is_active=visibility == "true")
