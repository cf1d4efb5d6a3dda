from django.contrib import admin

from .models import Tour


@admin.register(Tour)
class TourAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "category",
        "travel_type",
        "price",
        "price_eur",
        "on_sale",
        "discount",
        "is_active",
        "sort_order",
        "created_at",
    )
    list_filter = ("is_active", "on_sale", "category", "travel_type", "primary_location")
    search_fields = ("title", "title_de", "slug", "category", "description")
    list_editable = ("is_active", "sort_order")
    readonly_fields = ("previous_slugs", "created_at", "updated_at")
    ordering = ("sort_order", "-created_at")
    fieldsets = (
        (None, {"fields": ("title", "title_de", "slug", "previous_slugs", "is_active", "sort_order")}),
        ("Pricing", {"fields": ("price", "price_eur", "on_sale", "discount")}),
        (
            "Content",
            {
                "fields": (
                    "travel_type",
                    "travel_type_de",
                    "category",
                    "category_de",
                    "description",
                    "description_de",
                    "long_description",
                    "long_description_de",
                    "highlights",
                    "highlights_de",
                )
            },
        ),
        (
            "Itinerary",
            {
                "classes": ("collapse",),
                "fields": (
                    "transportation",
                    "transportation_de",
                    "location",
                    "location_de",
                    "details",
                    "details_de",
                    "description2",
                    "description2_de",
                    "days_and_durations",
                    "days_and_durations_de",
                    "pickup",
                    "pickup_de",
                    "briefing",
                    "briefing_de",
                    "trip",
                    "trip_de",
                    "program",
                    "program_de",
                    "food_and_beverages",
                    "food_and_beverages_de",
                    "what_to_take",
                    "what_to_take_de",
                    "pickup_location",
                    "pickup_location_de",
                    "van_location",
                    "van_location_de",
                )
            },
        ),
        (
            "Stops",
            {
                "classes": ("collapse",),
                "fields": tuple(
                    name for index in range(1, 7) for name in (f"location{index}", f"location{index}_de")
                ),
            },
        ),
        ("Images", {"fields": ("image1", "image2", "image3", "image4")}),
        (
            "SEO",
            {
                "classes": ("collapse",),
                "fields": (
                    "seo_title",
                    "seo_description",
                    "seo_noindex",
                    "og_image",
                    "canonical_url",
                    "primary_location",
                ),
            },
        ),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )
