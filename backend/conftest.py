import itertools
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from tours.models import Tour


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return get_user_model().objects.create_admin(
        email="office@sphinx-reisen.test", password="office-pass", name="Office"
    )


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def make_tour(db):
    sequence = itertools.count(1)

    def factory(**overrides):
        number = next(sequence)
        fields = {
            "title": f"Pyramids Day Trip {number}",
            "travel_type": Tour.ONE_DAY,
            "category": "Cultural Tours",
            "description": "A full day at the pyramids of Giza and the Sphinx.",
            "price": Decimal("100.00"),
        }
        fields.update(overrides)
        return Tour.objects.create(**fields)

    return factory
