import django_filters
from django.db.models import Q

from core.pagination import ListQuerySerializer

from .models import Booking


class BookingFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Booking.STATUS_CHOICES)
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Booking
        fields = []

    def filter_search(self, queryset, name, value):
        term = value.strip()
        if not term:
            return queryset
        return queryset.filter(
            Q(name__icontains=term)
            | Q(email__icontains=term)
            | Q(phone__icontains=term)
            | Q(tour_title__icontains=term)
        )


class BookingListQuery(ListQuerySerializer):
    sort_fields = {
        "createdAt": "created_at",
        "travelDate": "travel_date",
        "name": "name",
        "status": "status",
    }
