from decimal import Decimal

import pytest

from tours.localization import localize_tour, normalize_locale, resolve_field
from tours.locations import category_to_slug, get_location_by_slug
from tours.models import Tour


def test_resolve_field():
    assert resolve_field("Pyramids", None, True) == "Pyramids"
    assert resolve_field("Pyramids", "", True) == "Pyramids"
    assert resolve_field("Pyramids", "Pyramiden", True) == "Pyramiden"
    assert resolve_field("Pyramids", "Pyramiden", False) == "Pyramids"


@pytest.mark.parametrize(
    "value, expected",
    [("de", "de"), ("DE", "de"), ("de-AT", "de"), ("en", "en"), ("fr", "en"), ("", "en"), (None, "en")],
)
def test_normalize_locale(value, expected):
    assert normalize_locale(value) == expected


def test_localize_tour_falls_back_field_by_field():
    tour = Tour(
        title="Nile Felucca Ride",
        title_de="Feluke auf dem Nil",
        travel_type=Tour.ONE_DAY,
        category="Nile Cruise",
        description="Sail past Elephantine Island at sunset.",
        price=Decimal("40"),
        highlights=["Sunset", "Tea on board"],
        highlights_de=[],
        location1="Aswan",
        location1_de="Assuan",
        location3="Elephantine Island",
    )

    display = localize_tour(tour, "de")

    assert display["title"] == "Feluke auf dem Nil"
    assert display["description"] == "Sail past Elephantine Island at sunset."
    assert display["highlights"] == ["Sunset", "Tea on board"]
    assert display["locations"] == ["Assuan", "Elephantine Island"]
    assert localize_tour(tour, "en")["locations"] == ["Aswan", "Elephantine Island"]


def test_category_to_slug():
    assert category_to_slug("Desert Safari") == "desert-safari"
    assert category_to_slug("  Nile   Cruise ") == "nile-cruise"
    assert category_to_slug("Cultural & Historic!") == "cultural--historic"


def test_location_lookup_is_case_insensitive():
    assert get_location_by_slug("Cairo").name_de == "Kairo"
    assert get_location_by_slug("atlantis") is None


@pytest.mark.parametrize(
    "highlights_de, expected",
    [
        (["", "  "], ["Sunset", "Tea on board"]),
        (["Sonnenuntergang", ""], ["Sonnenuntergang"]),
        (None, ["Sunset", "Tea on board"]),
    ],
)
def test_blank_german_highlights_fall_back_to_english(highlights_de, expected):
    tour = Tour(title="Felucca", highlights=["Sunset", "", "Tea on board"], highlights_de=highlights_de)

    assert localize_tour(tour, "de")["highlights"] == expected
