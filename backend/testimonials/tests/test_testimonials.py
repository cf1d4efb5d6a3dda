import pytest

from testimonials.models import Testimonial, pick_avatar_color


@pytest.fixture
def make_testimonial(db):
    def factory(**overrides):
        fields = {
            "name": "Jana Doe",
            "country": "Germany",
            "initials": "JD",
            "text": "Our guide made Cairo feel like home.",
        }
        fields.update(overrides)
        return Testimonial.objects.create(**fields)

    return factory


@pytest.mark.parametrize(
    "seed, color",
    [("AB", "purple"), ("JD", "blue"), ("AC", "green"), (" ab ", "purple"), ("", "blue")],
)
def test_pick_avatar_color(seed, color):
    assert pick_avatar_color(seed) == color


@pytest.mark.django_db
def test_public_list_shows_active_in_sort_order(api_client, make_testimonial):
    make_testimonial(name="Second", sort_order=2)
    make_testimonial(name="First", sort_order=1)
    make_testimonial(name="Hidden", sort_order=0, is_active=False)

    data = api_client.get("/api/testimonials/").json()["data"]

    assert [item["name"] for item in data["testimonials"]] == ["First", "Second"]
    assert data["pagination"]["limit"] == 50


@pytest.mark.django_db
def test_sort_by_created_at_desc(api_client, make_testimonial):
    make_testimonial(name="Older")
    make_testimonial(name="Newer")

    response = api_client.get("/api/testimonials/", {"sortBy": "createdAt", "sortOrder": "desc"})

    assert [item["name"] for item in response.json()["data"]["testimonials"]] == ["Newer", "Older"]


@pytest.mark.django_db
@pytest.mark.parametrize("value", ["false", "all"])
def test_hidden_testimonials_are_admin_only(api_client, value):
    assert api_client.get("/api/testimonials/", {"isActive": value}).status_code == 403


@pytest.mark.django_db
def test_admin_visibility_filters(admin_client, make_testimonial):
    make_testimonial(name="Shown")
    make_testimonial(name="Hidden", is_active=False)

    hidden = admin_client.get("/api/testimonials/", {"isActive": "false"}).json()["data"]["testimonials"]
    everything = admin_client.get("/api/testimonials/", {"isActive": "all"}).json()["data"]["testimonials"]

    assert [item["name"] for item in hidden] == ["Hidden"]
    assert len(everything) == 2


@pytest.mark.django_db
def test_display_block_is_localized(api_client, make_testimonial):
    make_testimonial(text_de="Unser Reiseleiter war großartig.", role="Photographer", role_de="")

    item = api_client.get("/api/testimonials/", {"locale": "de"}).json()["data"]["testimonials"][0]

    assert item["display"] == {"role": "Photographer", "text": "Unser Reiseleiter war großartig."}


@pytest.mark.django_db
def test_display_block_follows_locale(api_client, make_testimonial):
    make_testimonial(role="Family traveller", role_de="Familienreisende", text_de="Alles war perfekt geplant.")

    english = api_client.get("/api/testimonials/").json()["data"]["testimonials"][0]["display"]
    german = api_client.get("/api/testimonials/", {"locale": "de"}).json()["data"]["testimonials"][0]["display"]

    assert english == {"role": "Family traveller", "text": "Our guide made Cairo feel like home."}
    assert german == {"role": "Familienreisende", "text": "Alles war perfekt geplant."}


@pytest.mark.django_db
def test_public_submission(api_client):
    response = api_client.post(
        "/api/testimonials/public/",
        {"name": "Alex Brown", "country": "Austria", "initials": " ab", "text": "A wonderful Nile cruise."},
        format="json",
    )

    assert response.status_code == 201
    testimonial = response.json()["data"]["testimonial"]
    assert testimonial["initials"] == "AB"
    assert testimonial["image"] == "purple"
    assert testimonial["is_active"] is True


@pytest.mark.django_db
def test_public_submission_ignores_admin_fields(api_client):
    api_client.post(
        "/api/testimonials/public/",
        {
            "name": "Alex Brown",
            "country": "Austria",
            "initials": "AC",
            "text": "A wonderful Nile cruise.",
            "sort_order": 99,
            "image": "blue",
        },
        format="json",
    )

    testimonial = Testimonial.objects.get()
    assert testimonial.sort_order == 0
    assert testimonial.image == "green"


@pytest.mark.django_db
def test_public_submission_validates(api_client):
    response = api_client.post(
        "/api/testimonials/public/",
        {"name": "A", "initials": "ABCD", "text": "short"},
        format="json",
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"name", "country", "initials", "text"}


@pytest.mark.django_db
def test_admin_crud(admin_client, api_client):
    created = admin_client.post(
        "/api/testimonials/",
        {"name": "Maria Keller", "initials": "mk", "text": "Best trip of our lives!", "sort_order": 3},
        format="json",
    )
    assert created.status_code == 201
    testimonial_id = created.json()["data"]["id"]
    assert created.json()["data"]["initials"] == "MK"

    updated = admin_client.put(f"/api/testimonials/{testimonial_id}/", {"is_active": False}, format="json")
    assert updated.json()["data"]["is_active"] is False
    assert updated.json()["data"]["sort_order"] == 3

    assert api_client.get(f"/api/testimonials/{testimonial_id}/").status_code == 404
    assert admin_client.get(f"/api/testimonials/{testimonial_id}/").status_code == 200

    deleted = admin_client.delete(f"/api/testimonials/{testimonial_id}/")
    assert deleted.json()["data"] == {"message": "Testimonial deleted successfully."}


@pytest.mark.django_db
def test_create_requires_admin(api_client):
    response = api_client.post(
        "/api/testimonials/",
        {"name": "Maria Keller", "initials": "MK", "text": "Best trip of our lives!"},
        format="json",
    )

    assert response.status_code == 401
