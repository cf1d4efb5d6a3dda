from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models


class Review(models.Model):
    name = models.CharField(max_length=100)
    email = models.EmailField()
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    review_text = models.TextField(max_length=1000, validators=[MinLengthValidator(10)])
    tour = models.ForeignKey("tours.Tour", on_delete=models.CASCADE, related_name="reviews")
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        constraints = [
            models.UniqueConstraint(fields=["email", "tour"], name="unique_review_per_email_and_tour"),
        ]

    def __str__(self):
        return f"{self.name} on {self.tour_id}: {self.rating}/5"
