from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from bookings.models import Booking
from reviews.models import Review
from tours.pricing import as_number, to_decimal

from .broker import BOOKING, REVIEW, broadcast_notification


@receiver(post_save, sender=Booking)
def announce_booking(sender, instance, created, **kwargs):
    if not created:
        return
    payload = {
        "id": instance.pk,
        "name": instance.name,
        "email": instance.email,
        "tour_id": instance.tour_id,
        "tour_title": instance.tour_title,
        "travel_date": str(instance.travel_date),
        "party_size": instance.party_size,
        "total_price": as_number(to_decimal(instance.total_price)),
        "currency_symbol": instance.currency_symbol,
        "status": instance.status,
    }
    transaction.on_commit(lambda: broadcast_notification(BOOKING, payload))


@receiver(post_save, sender=Review)
def announce_review(sender, instance, created, **kwargs):
    if not created:
        return
    payload = {
        "id": instance.pk,
        "name": instance.name,
        "rating": instance.rating,
        "tour_id": instance.tour_id,
        "tour_title": instance.tour.title,
        "is_approved": instance.is_approved,
    }
    transaction.on_commit(lambda: broadcast_notification(REVIEW, payload))
