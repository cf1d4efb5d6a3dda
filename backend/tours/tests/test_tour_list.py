from decimal import Decimal

import pytest


def _titles(response):
    return [tour["title"] for tour in response.json()["data"]["tours"]]


@pytest.mark.django_db
def test_default_listing_shows_only_active_tours(api_client, make_tour):
    make_tour(title="Visible Tour")
    make_tour(title="Hidden Tour", is_active=False)

    response = api_client.get("/api/tours/")

    assert response.status_code == 200
    assert _titles(response) == ["Visible Tour"]


@pytest.mark.django_db
def test_is_active_false_includes_inactive_tours(api_client, make_tour):
    make_tour(title="Visible Tour", sort_order=1)
    make_tour(title="Hidden Tour", is_active=False, sort_order=2)

    response = api_client.get("/api/tours/", {"isActive": "false"})

    assert _titles(response) == ["Visible Tour", "Hidden Tour"]


@pytest.mark.django_db
def test_on_sale_false_matches_unset_flags(api_client, make_tour):
    make_tour(title="Sale Tour", on_sale=True, discount=10)
    make_tour(title="Regular Tour", on_sale=False)
    make_tour(title="Legacy Tour", on_sale=None)

    not_on_sale = api_client.get("/api/tours/", {"onSale": "false", "sortBy": "title"})
    on_sale = api_client.get("/api/tours/", {"onSale": "true"})

    assert _titles(not_on_sale) == ["Legacy Tour", "Regular Tour"]
    assert _titles(on_sale) == ["Sale Tour"]


@pytest.mark.django_db
def test_pagination_meta(api_client, make_tour):
    for index in range(5):
        make_tour(sort_order=index)

    response = api_client.get("/api/tours/", {"page": 3, "limit": 2})

    data = response.json()["data"]
    assert len(data["tours"]) == 1
    assert data["pagination"] == {
        "total": 5,
        "page": 3,
        "limit": 2,
        "totalPages": 3,
        "hasMore": False,
    }


@pytest.mark.django_db
def test_default_page_size_is_twelve(api_client, make_tour):
    for _ in range(13):
        make_tour()

    data = api_client.get("/api/tours/").json()["data"]

    assert len(data["tours"]) == 12
    assert data["pagination"]["hasMore"] is True


@pytest.mark.django_db
@pytest.mark.parametrize(
    "params, field",
    [
        ({"limit": 0}, "limit"),
        ({"limit": 501}, "limit"),
        ({"page": "first"}, "page"),
        ({"sortBy": "rating"}, "sortBy"),
        ({"sortOrder": "sideways"}, "sortOrder"),
        ({"onSale": "maybe"}, "onSale"),
        ({"isActive": "yes"}, "isActive"),
    ],
)
def test_invalid_query_values_are_rejected(api_client, params, field):
    response = api_client.get("/api/tours/", params)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert field in {error["field"] for error in body["errors"]}


@pytest.mark.django_db
def test_sort_by_price_descending(api_client, make_tour):
    make_tour(title="Cheap", price=Decimal("20"))
    make_tour(title="Premium", price=Decimal("900"))
    make_tour(title="Middle", price=Decimal("150"))

    response = api_client.get("/api/tours/", {"sortBy": "price", "sortOrder": "desc"})

    assert _titles(response) == ["Premium", "Middle", "Cheap"]


@pytest.mark.django_db
def test_search_covers_german_copy(api_client, make_tour):
    make_tour(title="White Desert Camping", title_de="Weiße Wüste Camping")
    make_tour(title="Alexandria Day Trip")

    response = api_client.get("/api/tours/", {"search": "wüste"})

    assert _titles(response) == ["White Desert Camping"]


@pytest.mark.django_db
def test_category_filter(api_client, make_tour):
    make_tour(title="Quad Biking", category="Desert Safari")
    make_tour(title="Museum Visit", category="Cultural Tours")

    response = api_client.get("/api/tours/", {"category": "desert safari"})

    assert _titles(response) == ["Quad Biking"]


@pytest.mark.django_db
def test_primary_location_matches_slug_and_names(api_client, make_tour):
    make_tour(title="Egyptian Museum", primary_location="Cairo", sort_order=1)
    make_tour(title="Khan el-Khalili", primary_location="Kairo", sort_order=2)
    make_tour(title="Karnak Temple", primary_location="luxor", sort_order=3)

    response = api_client.get("/api/tours/", {"primaryLocation": "cairo"})

    assert _titles(response) == ["Egyptian Museum", "Khan el-Khalili"]


@pytest.mark.django_db
def test_pricing_block_follows_locale(api_client, make_tour):
    make_tour(price=Decimal("200"), price_eur=Decimal("180"), on_sale=True, discount=25)

    english = api_client.get("/api/tours/").json()["data"]["tours"][0]
    german = api_client.get("/api/tours/", {"locale": "de"}).json()["data"]["tours"][0]

    assert english["pricing"]["formatted"] == "$150"
    assert german["pricing"]["formatted"] == "€135"
    assert german["price"] == 200
