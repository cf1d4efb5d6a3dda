from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "email",
        "tour_title",
        "travel_date",
        "adults",
        "children",
        "infants",
        "total_price",
        "currency",
        "status",
        "created_at",
    )
    list_filter = ("status", "currency", "locale", "travel_date")
    search_fields = ("name", "email", "phone", "tour_title")
    date_hierarchy = "travel_date"
    readonly_fields = ("total_price", "currency", "currency_symbol", "created_at", "updated_at")
    raw_id_fields = ("tour",)
    actions = ("mark_confirmed", "mark_cancelled")

    @admin.action(description="Mark selected bookings as confirmed")
    def mark_confirmed(self, request, queryset):
        queryset.update(status=Booking.CONFIRMED)

    @admin.action(description="Mark selected bookings as cancelled")
    def mark_cancelled(self, request, queryset):
        queryset.update(status=Booking.CANCELLED)
