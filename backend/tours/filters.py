import django_filters
from django.db.models import Q

from core.pagination import ListQuerySerializer

from .locations import get_location_by_slug
from .models import Tour

BOOLEAN_CHOICES = [("true", "true"), ("false", "false")]

SEARCH_FIELDS = ("title", "title_de", "description", "description_de", "category", "category_de")


class TourFilter(django_filters.FilterSet):
    """
    Public tour list filters.

    Without ``isActive`` only active tours are listed; ``isActive=false`` lifts
    the restriction. ``onSale=false`` also matches legacy rows whose flag is unset.
    """

    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    onSale = django_filters.ChoiceFilter(choices=BOOLEAN_CHOICES, method="filter_on_sale")
    isActive = django_filters.ChoiceFilter(choices=BOOLEAN_CHOICES, method="filter_is_active")
    search = django_filters.CharFilter(method="filter_search")
    primaryLocation = django_filters.CharFilter(method="filter_primary_location")

    class Meta:
        model = Tour
        fields = []

    def filter_queryset(self, queryset):
        if not self.form.cleaned_data.get("isActive"):
            queryset = queryset.filter(is_active=True)
        return super().filter_queryset(queryset)

    def filter_on_sale(self, queryset, name, value):
        if value == "true":
            return queryset.filter(on_sale=True)
        return queryset.filter(Q(on_sale=False) | Q(on_sale__isnull=True))

    def filter_is_active(self, queryset, name, value):
        if value == "true":
            return queryset.filter(is_active=True)
        return queryset

    def filter_search(self, queryset, name, value):
        term = value.strip()
        if not term:
            return queryset
        condition = Q()
        for field in SEARCH_FIELDS:
            condition |= Q(**{f"{field}__icontains": term})
        return queryset.filter(condition)

    def filter_primary_location(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        location = get_location_by_slug(value)
        names = location.names() if location else [value]
        condition = Q()
        for candidate in names:
            condition |= Q(primary_location__iexact=candidate)
        return queryset.filter(condition)


class TourListQuery(ListQuerySerializer):
    sort_fields = {
        "createdAt": "created_at",
        "price": "price",
        "title": "title",
        "sortOrder": "sort_order",
    }
    default_limit = 12
    default_sort_by = "sortOrder"
    default_sort_order = "asc"
