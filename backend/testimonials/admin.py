from django.contrib import admin

from .models import Testimonial


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ("name", "country", "initials", "image", "sort_order", "is_active", "created_at")
    list_filter = ("is_active", "image")
    search_fields = ("name", "country", "text", "text_de")
    list_editable = ("sort_order", "is_active")
    ordering = ("sort_order", "-created_at")
