import logging
from collections import Counter

from django.db import transaction
from django.db.models import Q
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrReadOnly, is_admin_request
from core.pagination import validated_list_query

from .filters import TourFilter, TourListQuery
from .localization import normalize_locale
from .locations import (
    CATEGORIES,
    LOCATIONS,
    LandingPage,
    category_page_slug,
    get_category_by_slug,
    get_location_by_slug,
)
from .models import Tour
from .pricing import quote_booking
from .serializers import BookingQuoteRequestSerializer, TourSerializer, TourSummarySerializer

logger = logging.getLogger(__name__)


def find_tour_by_slug(slug: str):
    """Return ``(tour, redirect_to)``; ``redirect_to`` is set when an old slug matched."""
    slug = slug.strip().lower()
    tour = Tour.objects.filter(slug=slug).first()
    if tour is not None:
        return tour, None
    # JSON containment is not portable; narrow with a text match and confirm in Python.
    for candidate in Tour.objects.filter(previous_slugs__icontains=slug).order_by("-updated_at"):
        if slug in (candidate.previous_slugs or []):
            return candidate, candidate.slug
    return None, None


class TourViewSet(viewsets.ModelViewSet):
    serializer_class = TourSerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_class = TourFilter
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        queryset = Tour.objects.all()
        if self.action != "list" and not is_admin_request(self.request):
            queryset = queryset.filter(is_active=True)
        return queryset

    def filter_queryset(self, queryset):
        # Query string filters describe the list; detail lookups ignore them.
        if self.action != "list":
            return queryset
        return super().filter_queryset(queryset)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        query = validated_list_query(TourListQuery, request)
        page = query.paginate(queryset)
        serializer = self.get_serializer(page.items, many=True)
        return Response({"tours": serializer.data, "pagination": page.meta()})

    def perform_create(self, serializer):
        with transaction.atomic():
            tour = serializer.save()
        logger.info("Tour %s created with slug %s", tour.pk, tour.slug)

    def update(self, request, *args, **kwargs):
        # PUT carries partial documents from the admin forms.
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_update(self, serializer):
        with transaction.atomic():
            serializer.save()

    def destroy(self, request, *args, **kwargs):
        tour = self.get_object()
        logger.info("Deleting tour %s (%s)", tour.pk, tour.slug)
        tour.delete()
        return Response({"message": "Tour deleted successfully."})

    @action(detail=False, methods=["get"], url_path=r"by-slug/(?P<slug>[^/]+)")
    def by_slug(self, request, slug=None):
        tour, redirect_to = find_tour_by_slug(slug)
        if tour is None or (not tour.is_active and not is_admin_request(request)):
            raise NotFound("Tour not found.")
        return Response({"tour": self.get_serializer(tour).data, "redirectTo": redirect_to})

    @action(detail=True, methods=["post"], permission_classes=[AllowAny])
    def quote(self, request, pk=None):
        tour = self.get_object()
        serializer = BookingQuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking_quote = quote_booking(
            tour,
            data["locale"],
            data["adults"],
            data["children"],
            data["infants"],
        )
        return Response({"tour_id": tour.pk, "locale": data["locale"], **booking_quote.as_dict()})


def _active_tours(condition: Q):
    return Tour.objects.filter(condition, is_active=True).order_by("sort_order", "-created_at", "-id")


class LocationListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        locale = normalize_locale(request.query_params.get("locale"))
        return Response({"locations": [location.localized(locale) for location in LOCATIONS]})


class LocationDetailView(APIView):
    """A location landing page with the active tours assigned to it."""

    permission_classes = [AllowAny]

    def get(self, request, slug, *args, **kwargs):
        location = get_location_by_slug(slug)
        if location is None:
            raise NotFound("Location not found.")
        condition = Q()
        for name in location.names():
            condition |= Q(primary_location__iexact=name)
        tours = TourSummarySerializer(
            _active_tours(condition), many=True, context={"request": request}
        ).data
        locale = normalize_locale(request.query_params.get("locale"))
        return Response({"location": location.localized(locale), "tours": tours})


def _categories_in_use():
    """Map landing page slugs to the raw category names active tours use."""
    names = {}
    counts = Counter()
    for category in Tour.objects.filter(is_active=True).values_list("category", flat=True):
        slug = category_page_slug(category)
        if not slug:
            continue
        names.setdefault(slug, set()).add(category)
        counts[slug] += 1
    return names, counts


def _category_page(slug: str, names) -> LandingPage:
    configured = get_category_by_slug(slug)
    if configured is not None:
        return configured
    name = sorted(names)[0]
    return LandingPage(
        slug=slug,
        name=name,
        seo_title=f"{name} Tours | Sphinx Reisen",
        seo_description=f"Book {name} tours in Egypt with Sphinx Reisen.",
    )


class CategoryListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        locale = normalize_locale(request.query_params.get("locale"))
        names, counts = _categories_in_use()
        slugs = [page.slug for page in CATEGORIES]
        slugs += sorted(slug for slug in names if slug not in slugs)
        categories = []
        for slug in slugs:
            page = _category_page(slug, names.get(slug, ()))
            categories.append({**page.localized(locale), "tour_count": counts[slug]})
        return Response({"categories": categories})


class CategoryDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, slug, *args, **kwargs):
        slug = slug.strip().lower()
        names, _ = _categories_in_use()
        if slug not in names and get_category_by_slug(slug) is None:
            raise NotFound("Category not found.")
        page = _category_page(slug, names.get(slug, ()))
        tours = TourSummarySerializer(
            _active_tours(Q(category__in=names.get(slug, ()))), many=True, context={"request": request}
        ).data
        locale = normalize_locale(request.query_params.get("locale"))
        return Response({"category": page.localized(locale), "tours": tours})
