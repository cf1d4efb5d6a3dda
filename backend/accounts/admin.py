from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class AdminUserAdmin(UserAdmin):
    list_display = ("email", "name", "is_staff", "is_active", "last_login", "date_joined")
    list_filter = ("is_staff", "is_active")
    search_fields = ("email", "name", "username")
    ordering = ("-date_joined",)
    fieldsets = UserAdmin.fieldsets + (("Profile", {"fields": ("name",)}),)
