from django.core.validators import MinLengthValidator
from django.db import models

AVATAR_COLORS = ("blue", "green", "purple")


def pick_avatar_color(seed: str) -> str:
    """Stable avatar colour for a set of initials."""
    normalized = (seed or "").strip().upper()
    checksum = 0
    for position, char in enumerate(normalized, start=1):
        checksum = (checksum + ord(char) * position) % 997
    return AVATAR_COLORS[checksum % len(AVATAR_COLORS)]


class Testimonial(models.Model):
    BLUE, GREEN, PURPLE = AVATAR_COLORS
    IMAGE_CHOICES = [(BLUE, "Blue"), (GREEN, "Green"), (PURPLE, "Purple")]

    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    country = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=100, blank=True)
    role_de = models.CharField(max_length=100, blank=True)
    initials = models.CharField(max_length=3)
    image = models.CharField(max_length=10, choices=IMAGE_CHOICES, default=BLUE)
    text = models.TextField(max_length=2000, validators=[MinLengthValidator(10)])
    text_de = models.TextField(max_length=2000, blank=True)
    sort_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("sort_order", "-created_at", "-id")

    def __str__(self):
        return f"{self.name} ({self.country})" if self.country else self.name
