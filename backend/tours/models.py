from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.text import slugify


def generate_slug(title: str) -> str:
    return slugify(title or "")[:200].strip("-")


class Tour(models.Model):
    ONE_DAY = "1 day"
    TWO_DAYS = "2 days"
    THREE_DAYS = "3 days"
    ONE_WEEK = "1 week"
    TWO_WEEKS = "2 weeks"
    TRAVEL_TYPE_CHOICES = [
        (ONE_DAY, "1 day"),
        (TWO_DAYS, "2 days"),
        (THREE_DAYS, "3 days"),
        (ONE_WEEK, "1 week"),
        (TWO_WEEKS, "2 weeks"),
    ]

    title = models.CharField(max_length=100)
    title_de = models.CharField(max_length=100, blank=True)
    travel_type = models.CharField(max_length=20, choices=TRAVEL_TYPE_CHOICES)
    travel_type_de = models.CharField(max_length=50, blank=True)
    category = models.CharField(max_length=50)
    category_de = models.CharField(max_length=50, blank=True)
    description = models.TextField(max_length=2000)
    description_de = models.TextField(max_length=2000, blank=True)
    long_description = models.TextField(max_length=5000, blank=True)
    long_description_de = models.TextField(max_length=5000, blank=True)
    highlights = models.JSONField(default=list, blank=True)
    highlights_de = models.JSONField(default=list, blank=True)

    transportation = models.CharField(max_length=500, blank=True)
    transportation_de = models.CharField(max_length=500, blank=True)
    location = models.CharField(max_length=200, blank=True)
    location_de = models.CharField(max_length=200, blank=True)
    details = models.TextField(max_length=2000, blank=True)
    details_de = models.TextField(max_length=2000, blank=True)
    description2 = models.TextField(max_length=2000, blank=True)
    description2_de = models.TextField(max_length=2000, blank=True)
    days_and_durations = models.TextField(max_length=1000, blank=True)
    days_and_durations_de = models.TextField(max_length=1000, blank=True)
    pickup = models.CharField(max_length=500, blank=True)
    pickup_de = models.CharField(max_length=500, blank=True)
    briefing = models.TextField(max_length=1000, blank=True)
    briefing_de = models.TextField(max_length=1000, blank=True)
    trip = models.TextField(max_length=2000, blank=True)
    trip_de = models.TextField(max_length=2000, blank=True)
    program = models.TextField(max_length=2000, blank=True)
    program_de = models.TextField(max_length=2000, blank=True)
    food_and_beverages = models.TextField(max_length=1000, blank=True)
    food_and_beverages_de = models.TextField(max_length=1000, blank=True)
    what_to_take = models.TextField(max_length=1000, blank=True)
    what_to_take_de = models.TextField(max_length=1000, blank=True)
    pickup_location = models.CharField(max_length=500, blank=True)
    pickup_location_de = models.CharField(max_length=500, blank=True)
    van_location = models.CharField(max_length=500, blank=True)
    van_location_de = models.CharField(max_length=500, blank=True)

    location1 = models.CharField(max_length=200, blank=True)
    location1_de = models.CharField(max_length=200, blank=True)
    location2 = models.CharField(max_length=200, blank=True)
    location2_de = models.CharField(max_length=200, blank=True)
    location3 = models.CharField(max_length=200, blank=True)
    location3_de = models.CharField(max_length=200, blank=True)
    location4 = models.CharField(max_length=200, blank=True)
    location4_de = models.CharField(max_length=200, blank=True)
    location5 = models.CharField(max_length=200, blank=True)
    location5_de = models.CharField(max_length=200, blank=True)
    location6 = models.CharField(max_length=200, blank=True)
    location6_de = models.CharField(max_length=200, blank=True)

    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    price_eur = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    # Nullable: rows imported before the flag existed carry no value.
    on_sale = models.BooleanField(null=True, blank=True, default=False)
    discount = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(100)])

    image1 = models.CharField(max_length=500, blank=True)
    image2 = models.CharField(max_length=500, blank=True)
    image3 = models.CharField(max_length=500, blank=True)
    image4 = models.CharField(max_length=500, blank=True)

    slug = models.SlugField(max_length=200, unique=True)
    previous_slugs = models.JSONField(default=list, blank=True)
    sort_order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)

    seo_title = models.CharField(max_length=70, blank=True)
    seo_description = models.CharField(max_length=200, blank=True)
    seo_noindex = models.BooleanField(default=False)
    og_image = models.CharField(max_length=500, blank=True)
    canonical_url = models.CharField(max_length=500, blank=True)
    primary_location = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("sort_order", "-created_at", "-id")
        indexes = [
            models.Index(fields=["is_active", "sort_order"], name="tours_tour_is_acti_6b1f0e_idx"),
            models.Index(fields=["category"], name="tours_tour_categor_3c2a9d_idx"),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        super().clean()
        for field in ("highlights", "highlights_de"):
            value = getattr(self, field)
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise ValidationError({field: "Must be a list of strings."})

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = generate_slug(self.title)
        # Slug uniqueness is left to the database constraint.
        self.full_clean(validate_unique=False)
        return super().save(*args, **kwargs)
