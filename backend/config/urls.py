from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from accounts.api import (
    AdminInitView,
    AdminLoginView,
    AdminUserViewSet,
    AuthCheckView,
    LogoutView,
    PasswordView,
)
from bookings.api import BookingViewSet
from core.api import HealthView
from notifications.api import NotificationStreamView
from reviews.api import ReviewViewSet
from testimonials.api import PublicTestimonialView, TestimonialViewSet
from tours.api import (
    CategoryDetailView,
    CategoryListView,
    LocationDetailView,
    LocationListView,
    TourViewSet,
)

router = DefaultRouter()
router.register(r"tours", TourViewSet, basename="tour")
router.register(r"bookings", BookingViewSet, basename="booking")
router.register(r"reviews", ReviewViewSet, basename="review")
router.register(r"testimonials", TestimonialViewSet, basename="testimonial")
router.register(r"admin/users", AdminUserViewSet, basename="admin-user")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health/", HealthView.as_view(), name="health"),
    path("api/auth/verify/", AdminLoginView.as_view(), name="auth-verify"),
    path("api/auth/logout/", LogoutView.as_view(), name="auth-logout"),
    path("api/auth/check/", AuthCheckView.as_view(), name="auth-check"),
    path("api/auth/password/", PasswordView.as_view(), name="auth-password"),
    path("api/admin/init/", AdminInitView.as_view(), name="admin-init"),
    path(
        "api/testimonials/public/",
        PublicTestimonialView.as_view(),
        name="testimonial-public",
    ),
    path(
        "api/notifications/",
        NotificationStreamView.as_view(),
        name="notification-stream",
    ),
    path("api/locations/", LocationListView.as_view(), name="location-list"),
    path(
        "api/locations/<slug:slug>/",
        LocationDetailView.as_view(),
        name="location-detail",
    ),
    path("api/categories/", CategoryListView.as_view(), name="category-list"),
    path(
        "api/categories/<slug:slug>/",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    path("api/", include(router.urls)),
]
