import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("tours", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=30)),
                (
                    "adults",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(20),
                        ]
                    ),
                ),
                (
                    "children",
                    models.PositiveSmallIntegerField(
                        default=0, validators=[django.core.validators.MaxValueValidator(20)]
                    ),
                ),
                (
                    "infants",
                    models.PositiveSmallIntegerField(
                        default=0, validators=[django.core.validators.MaxValueValidator(20)]
                    ),
                ),
                ("travel_date", models.DateField()),
                ("tour_title", models.CharField(blank=True, max_length=200)),
                ("locale", models.CharField(default="en", max_length=2)),
                ("pickup_location", models.CharField(blank=True, max_length=200)),
                ("pickup_location_outside", models.CharField(blank=True, max_length=200)),
                ("message", models.TextField(blank=True, max_length=1000)),
                ("notes", models.TextField(blank=True, max_length=1000)),
                ("requirements", models.CharField(blank=True, max_length=100)),
                (
                    "total_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "currency",
                    models.CharField(choices=[("USD", "US dollar"), ("EUR", "Euro")], default="USD", max_length=3),
                ),
                ("currency_symbol", models.CharField(default="$", max_length=1)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("confirmed", "Confirmed"), ("cancelled", "Cancelled")],
                        default="pending",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "tour",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to="tours.tour",
                    ),
                ),
            ],
            options={
                "ordering": ("-created_at", "-id"),
                "indexes": [
                    models.Index(fields=["status"], name="bookings_bo_status_4d7e21_idx"),
                    models.Index(fields=["travel_date"], name="bookings_bo_travel__8a0c55_idx"),
                ],
            },
        ),
    ]
