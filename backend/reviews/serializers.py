from rest_framework import serializers

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    tour_id = serializers.IntegerField(read_only=True)
    tour_title = serializers.CharField(source="tour.title", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "name",
            "email",
            "rating",
            "review_text",
            "tour_id",
            "tour_title",
            "is_approved",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PublicReviewSerializer(ReviewSerializer):
    """Review as shown on the site: no reviewer email."""

    class Meta(ReviewSerializer.Meta):
        fields = [field for field in ReviewSerializer.Meta.fields if field != "email"]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100)
    email = serializers.EmailField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    review_text = serializers.CharField(min_length=10, max_length=1000)
    tour = serializers.IntegerField(min_value=1, error_messages={"invalid": "Invalid tour id."})

    def validate_email(self, value: str) -> str:
        return value.strip().lower()


class ReviewUpdateSerializer(serializers.ModelSerializer):
    review_text = serializers.CharField(min_length=10, max_length=1000, required=False)

    class Meta:
        model = Review
        fields = ["is_approved", "review_text"]
