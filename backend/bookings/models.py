from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Booking(models.Model):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
        (CANCELLED, "Cancelled"),
    ]

    USD = "USD"
    EUR = "EUR"
    CURRENCY_CHOICES = [(USD, "US dollar"), (EUR, "Euro")]

    name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=30)
    adults = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(20)])
    children = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(20)])
    infants = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(20)])
    travel_date = models.DateField()
    tour = models.ForeignKey(
        "tours.Tour",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    # Kept so the booking still reads correctly after the tour is renamed or deleted.
    tour_title = models.CharField(max_length=200, blank=True)
    locale = models.CharField(max_length=2, default="en")
    pickup_location = models.CharField(max_length=200, blank=True)
    pickup_location_outside = models.CharField(max_length=200, blank=True)
    message = models.TextField(max_length=1000, blank=True)
    notes = models.TextField(max_length=1000, blank=True)
    requirements = models.CharField(max_length=100, blank=True)
    total_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    currency = models.CharField(max_length=3, choices=CURRENCY_CHOICES, default=USD)
    currency_symbol = models.CharField(max_length=1, default="$")
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        indexes = [
            models.Index(fields=["status"], name="bookings_bo_status_4d7e21_idx"),
            models.Index(fields=["travel_date"], name="bookings_bo_travel__8a0c55_idx"),
        ]

    def __str__(self):
        return f"{self.name} · {self.tour_title or 'tour removed'} on {self.travel_date}"

    @property
    def party_size(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def formatted_total(self) -> str:
        return f"{self.currency_symbol}{self.total_price:.2f}"
