from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Avg, Count
from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied

from accounts.permissions import is_admin_request
from core.pagination import ListQuerySerializer

APPROVED_ONLY = "true"


class ReviewListQuery(ListQuerySerializer):
    """
    ``tourId`` narrows to one tour. ``isApproved`` defaults to approved reviews;
    ``false`` and ``all`` expose the moderation queue and are reserved for admins.
    """

    tourId = serializers.IntegerField(min_value=1, required=False, error_messages={"invalid": "Invalid tour id."})
    isApproved = serializers.ChoiceField(choices=["true", "false", "all"], required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        attrs.setdefault("isApproved", APPROVED_ONLY)
        return attrs

    def check_access(self, request):
        if self.validated_data["isApproved"] != APPROVED_ONLY and not is_admin_request(request):
            raise PermissionDenied("Only admins can list unapproved reviews.")

    def filter(self, queryset):
        data = self.validated_data
        if "tourId" in data:
            queryset = queryset.filter(tour_id=data["tourId"])
        if data["isApproved"] != "all":
            queryset = queryset.filter(is_approved=data["isApproved"] == "true")
        return queryset


def rating_stats(queryset) -> dict:
    """Average rating rounded half up to one decimal, plus the review count."""
    aggregate = queryset.aggregate(average=Avg("rating"), total=Count("id"))
    average = aggregate["average"]
    if average is None:
        return {"averageRating": 0, "totalReviews": 0}
    rounded = Decimal(str(average)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return {"averageRating": float(rounded), "totalReviews": aggregate["total"]}
