from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "tour", "rating", "is_approved", "created_at")
    list_filter = ("is_approved", "rating")
    search_fields = ("name", "email", "review_text", "tour__title")
    list_editable = ("is_approved",)
    raw_id_fields = ("tour",)
    actions = ("approve", "unapprove")

    @admin.action(description="Approve selected reviews")
    def approve(self, request, queryset):
        queryset.update(is_approved=True)

    @admin.action(description="Hide selected reviews")
    def unapprove(self, request, queryset):
        queryset.update(is_approved=False)
