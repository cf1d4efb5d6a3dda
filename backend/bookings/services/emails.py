from __future__ import annotations

from django.conf import settings
from django.core.mail import send_mail

from bookings.models import Booking

GREETINGS = {
    "en": "Hi {name},",
    "de": "Hallo {name},",
}


def _booking_lines(booking: Booking) -> list[str]:
    lines = [
        f"Tour: {booking.tour_title}",
        f"Travel date: {booking.travel_date:%B %d, %Y}",
        f"Travellers: {booking.adults} adults, {booking.children} children, {booking.infants} infants",
        f"Total: {booking.formatted_total}",
    ]
    if booking.pickup_location:
        lines.append(f"Pickup: {booking.pickup_location}")
    if booking.pickup_location_outside:
        lines.append(f"Pickup (other): {booking.pickup_location_outside}")
    return lines


def send_booking_confirmation_email(*, booking: Booking) -> None:
    """Tell the customer we received the booking request."""
    greeting = GREETINGS.get(booking.locale, GREETINGS["en"]).format(name=booking.name)
    body_lines = [
        greeting,
        "",
        "Thank you for booking with Sphinx Reisen. We received your request and will confirm it shortly.",
        "",
        *_booking_lines(booking),
        "",
        f"Questions? Reply to this email or visit {settings.APP_URL}.",
        "",
        "The Sphinx Reisen Team",
    ]
    send_mail(
        f"Booking request received: {booking.tour_title}",
        "\n".join(body_lines),
        settings.DEFAULT_FROM_EMAIL,
        [booking.email],
        fail_silently=False,
    )


def send_booking_notification_email(*, booking: Booking) -> bool:
    """Copy the operator inbox when one is configured. Returns whether a mail went out."""
    recipient = settings.BOOKING_NOTIFICATION_EMAIL
    if not recipient:
        return False
    body_lines = [
        f"New booking #{booking.pk} from {booking.name} <{booking.email}>, phone {booking.phone}.",
        "",
        *_booking_lines(booking),
    ]
    if booking.message:
        body_lines += ["", "Message:", booking.message]
    if booking.requirements:
        body_lines += ["", f"Requirements: {booking.requirements}"]
    body_lines += ["", f"{settings.APP_URL}/admin/bookings/{booking.pk}"]
    send_mail(
        f"New booking: {booking.tour_title} on {booking.travel_date:%Y-%m-%d}",
        "\n".join(body_lines),
        settings.DEFAULT_FROM_EMAIL,
        [recipient],
        fail_silently=False,
    )
    return True
