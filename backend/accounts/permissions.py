from rest_framework.permissions import BasePermission


def is_admin_request(request) -> bool:
    user = getattr(request, "user", None)
    return bool(user and user.is_authenticated and user.is_staff and user.is_active)


class IsAdmin(BasePermission):
    """Allow only signed-in back-office staff."""

    message = "Admin access required."

    def has_permission(self, request, view):
        return is_admin_request(request)


class IsAdminOrReadOnly(IsAdmin):
    def has_permission(self, request, view):
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        return super().has_permission(request, view)
