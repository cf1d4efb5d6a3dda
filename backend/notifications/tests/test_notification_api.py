import json
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from bookings.models import Booking
from notifications.broker import broker


@pytest.mark.django_db
def test_stream_requires_admin(api_client):
    response = api_client.get("/api/notifications/", HTTP_ACCEPT="text/event-stream")

    assert response.status_code == 401


@pytest.mark.django_db
def test_stream_opens_with_retry_and_welcome(admin_client):
    response = admin_client.get("/api/notifications/", HTTP_ACCEPT="text/event-stream")

    try:
        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/event-stream")
        assert response["Cache-Control"] == "no-cache, no-transform"
        chunks = iter(response.streaming_content)
        assert next(chunks) == b"retry: 3000\n\n"
        welcome = json.loads(next(chunks).decode()[len("data: "):])
        assert welcome["type"] == "connected"
        assert broker.subscriber_count == 1
    finally:
        response.close()

    assert broker.subscriber_count == 0


@pytest.mark.django_db
def test_new_booking_is_announced(api_client, make_tour, django_capture_on_commit_callbacks):
    tour = make_tour(title="Felucca Sunset", price=Decimal("40"))
    subscription = broker.subscribe()
    try:
        with django_capture_on_commit_callbacks(execute=True):
            api_client.post(
                "/api/bookings/",
                {
                    "name": "Greta Guest",
                    "email": "greta@example.com",
                    "phone": "+49 170 1234567",
                    "adults": 2,
                    "travel_date": (timezone.localdate() + timedelta(days=3)).isoformat(),
                    "tour": tour.pk,
                },
                format="json",
            )
        message = subscription.get(timeout=1)
    finally:
        subscription.close()

    assert message["type"] == "booking"
    assert message["data"]["tour_title"] == "Felucca Sunset"
    assert message["data"]["total_price"] == 80


@pytest.mark.django_db
def test_new_review_is_announced(api_client, make_tour, django_capture_on_commit_callbacks):
    tour = make_tour(title="Felucca Sunset")
    subscription = broker.subscribe()
    try:
        with django_capture_on_commit_callbacks(execute=True):
            api_client.post(
                "/api/reviews/",
                {
                    "name": "Greta Guest",
                    "email": "greta@example.com",
                    "rating": 5,
                    "review_text": "Magical evening on the river.",
                    "tour": tour.pk,
                },
                format="json",
            )
        message = subscription.get(timeout=1)
    finally:
        subscription.close()

    assert message["type"] == "review"
    assert message["data"]["rating"] == 5


@pytest.mark.django_db
def test_rolled_back_bookings_are_not_announced(make_tour, django_capture_on_commit_callbacks):
    tour = make_tour()
    subscription = broker.subscribe()
    try:
        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            Booking.objects.create(
                name="Greta Guest",
                email="greta@example.com",
                phone="+49 170 1234567",
                adults=1,
                travel_date=timezone.localdate(),
                tour=tour,
                total_price=Decimal("100"),
            )
        assert len(callbacks) == 1
        assert subscription.get(timeout=0) is None
    finally:
        subscription.close()
