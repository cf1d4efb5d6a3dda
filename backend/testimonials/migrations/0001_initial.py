import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Testimonial",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "name",
                    models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(2)]),
                ),
                ("country", models.CharField(blank=True, max_length=100)),
                ("role", models.CharField(blank=True, max_length=100)),
                ("role_de", models.CharField(blank=True, max_length=100)),
                ("initials", models.CharField(max_length=3)),
                (
                    "image",
                    models.CharField(
                        choices=[("blue", "Blue"), ("green", "Green"), ("purple", "Purple")],
                        default="blue",
                        max_length=10,
                    ),
                ),
                (
                    "text",
                    models.TextField(max_length=2000, validators=[django.core.validators.MinLengthValidator(10)]),
                ),
                ("text_de", models.TextField(blank=True, max_length=2000)),
                ("sort_order", models.PositiveIntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("sort_order", "-created_at", "-id"),
            },
        ),
    ]
