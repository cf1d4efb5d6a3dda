from __future__ import annotations

import logging
from smtplib import SMTPException

from django.db import transaction
from rest_framework.exceptions import NotFound

from bookings.models import Booking
from tours.models import Tour
from tours.pricing import quote_booking

from .emails import send_booking_confirmation_email, send_booking_notification_email

logger = logging.getLogger(__name__)


def get_bookable_tour(tour_id: int) -> Tour:
    tour = Tour.objects.filter(pk=tour_id, is_active=True).first()
    if tour is None:
        raise NotFound("Tour not found.")
    return tour


def create_booking(data: dict) -> Booking:
    """
    Persist a public booking request priced on the server.

    ``data`` is the validated booking form. Any ``total_price`` it carries is only
    compared against the recomputed total; the stored price always comes from the tour.
    """
    tour = get_bookable_tour(data["tour"])
    quote = quote_booking(tour, data["locale"], data["adults"], data["children"], data["infants"])

    client_total = data.get("total_price")
    if client_total is not None and client_total != quote.total:
        logger.warning(
            "Ignoring client booking total %s for tour %s; server total is %s %s",
            client_total,
            tour.pk,
            quote.total,
            quote.unit.currency,
        )

    with transaction.atomic():
        booking = Booking.objects.create(
            name=data["name"].strip(),
            email=data["email"],
            phone=data["phone"].strip(),
            adults=data["adults"],
            children=data["children"],
            infants=data["infants"],
            travel_date=data["travel_date"],
            tour=tour,
            tour_title=tour.title,
            locale=data["locale"],
            pickup_location=data["pickup_location"],
            pickup_location_outside=data["pickup_location_outside"],
            message=data["message"],
            requirements=data["requirements"],
            total_price=quote.total,
            currency=quote.unit.currency,
            currency_symbol=quote.unit.symbol,
        )
    logger.info("Booking %s created for tour %s (%s)", booking.pk, tour.pk, booking.formatted_total)

    try:
        send_booking_confirmation_email(booking=booking)
        send_booking_notification_email(booking=booking)
    except (SMTPException, OSError) as exc:
        logger.exception("Failed to send booking emails for booking %s: %s", booking.pk, exc)
    return booking
