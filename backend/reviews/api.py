import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from accounts.permissions import IsAdmin, is_admin_request
from core.exceptions import Conflict
from core.pagination import validated_list_query
from tours.models import Tour

from .filters import ReviewListQuery, rating_stats
from .models import Review
from .serializers import (
    PublicReviewSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW = "You have already reviewed this tour."


class ReviewViewSet(viewsets.ModelViewSet):
    queryset = Review.objects.select_related("tour")
    serializer_class = ReviewSerializer
    permission_classes = [IsAdmin]
    lookup_value_regex = r"[0-9]+"

    def get_permissions(self):
        if self.action in ("list", "create"):
            return [AllowAny()]
        return super().get_permissions()

    def list(self, request, *args, **kwargs):
        query = validated_list_query(ReviewListQuery, request)
        query.check_access(request)
        page = query.paginate(query.filter(self.get_queryset()))
        serializer_class = ReviewSerializer if is_admin_request(request) else PublicReviewSerializer
        payload = {
            "reviews": serializer_class(page.items, many=True).data,
            "pagination": page.meta(),
        }
        tour_id = query.validated_data.get("tourId")
        if tour_id is not None:
            payload["stats"] = rating_stats(Review.objects.filter(tour_id=tour_id, is_approved=True))
        return Response(payload)

    def create(self, request, *args, **kwargs):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        tour = Tour.objects.filter(pk=data["tour"]).first()
        if tour is None:
            raise NotFound("Tour not found.")
        if Review.objects.filter(email=data["email"], tour=tour).exists():
            raise Conflict(DUPLICATE_REVIEW)

        try:
            with transaction.atomic():
                review = Review.objects.create(
                    name=data["name"].strip(),
                    email=data["email"],
                    rating=data["rating"],
                    review_text=data["review_text"].strip(),
                    tour=tour,
                    is_approved=settings.REVIEWS_AUTO_APPROVE,
                )
        except IntegrityError:
            # Lost a race against an identical submission.
            raise Conflict(DUPLICATE_REVIEW)
        logger.info("Review %s created for tour %s (approved=%s)", review.pk, tour.pk, review.is_approved)
        return Response(PublicReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        review = self.get_object()
        serializer = ReviewUpdateSerializer(review, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(ReviewSerializer(review).data)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"message": "Review deleted successfully."})
