import django.core.validators
from django.db import migrations, models


def _text(max_length, blank=True):
    return models.TextField(blank=blank, max_length=max_length)


def _char(max_length, blank=True):
    return models.CharField(blank=blank, max_length=max_length)


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Tour",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", _char(100, blank=False)),
                ("title_de", _char(100)),
                (
                    "travel_type",
                    models.CharField(
                        choices=[
                            ("1 day", "1 day"),
                            ("2 days", "2 days"),
                            ("3 days", "3 days"),
                            ("1 week", "1 week"),
                            ("2 weeks", "2 weeks"),
                        ],
                        max_length=20,
                    ),
                ),
                ("travel_type_de", _char(50)),
                ("category", _char(50, blank=False)),
                ("category_de", _char(50)),
                ("description", _text(2000, blank=False)),
                ("description_de", _text(2000)),
                ("long_description", _text(5000)),
                ("long_description_de", _text(5000)),
                ("highlights", models.JSONField(blank=True, default=list)),
                ("highlights_de", models.JSONField(blank=True, default=list)),
                ("transportation", _char(500)),
                ("transportation_de", _char(500)),
                ("location", _char(200)),
                ("location_de", _char(200)),
                ("details", _text(2000)),
                ("details_de", _text(2000)),
                ("description2", _text(2000)),
                ("description2_de", _text(2000)),
                ("days_and_durations", _text(1000)),
                ("days_and_durations_de", _text(1000)),
                ("pickup", _char(500)),
                ("pickup_de", _char(500)),
                ("briefing", _text(1000)),
                ("briefing_de", _text(1000)),
                ("trip", _text(2000)),
                ("trip_de", _text(2000)),
                ("program", _text(2000)),
                ("program_de", _text(2000)),
                ("food_and_beverages", _text(1000)),
                ("food_and_beverages_de", _text(1000)),
                ("what_to_take", _text(1000)),
                ("what_to_take_de", _text(1000)),
                ("pickup_location", _char(500)),
                ("pickup_location_de", _char(500)),
                ("van_location", _char(500)),
                ("van_location_de", _char(500)),
                ("location1", _char(200)),
                ("location1_de", _char(200)),
                ("location2", _char(200)),
                ("location2_de", _char(200)),
                ("location3", _char(200)),
                ("location3_de", _char(200)),
                ("location4", _char(200)),
                ("location4_de", _char(200)),
                ("location5", _char(200)),
                ("location5_de", _char(200)),
                ("location6", _char(200)),
                ("location6_de", _char(200)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "price_eur",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("on_sale", models.BooleanField(blank=True, default=False, null=True)),
                (
                    "discount",
                    models.PositiveSmallIntegerField(
                        default=0,
                        validators=[django.core.validators.MaxValueValidator(100)],
                    ),
                ),
                ("image1", _char(500)),
                ("image2", _char(500)),
                ("image3", _char(500)),
                ("image4", _char(500)),
                ("slug", models.SlugField(max_length=200, unique=True)),
                ("previous_slugs", models.JSONField(blank=True, default=list)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("seo_title", _char(70)),
                ("seo_description", _char(200)),
                ("seo_noindex", models.BooleanField(default=False)),
                ("og_image", _char(500)),
                ("canonical_url", _char(500)),
                ("primary_location", _char(100)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("sort_order", "-created_at", "-id"),
                "indexes": [
                    models.Index(fields=["is_active", "sort_order"], name="tours_tour_is_acti_6b1f0e_idx"),
                    models.Index(fields=["category"], name="tours_tour_categor_3c2a9d_idx"),
                ],
            },
        ),
    ]
