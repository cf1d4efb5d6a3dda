import pytest
from django.db import IntegrityError

from reviews.models import Review


@pytest.fixture
def tour(make_tour):
    return make_tour(title="Valley of the Kings")


@pytest.fixture
def make_review(tour):
    def factory(**overrides):
        fields = {
            "name": "Greta Guest",
            "email": "greta@example.com",
            "rating": 5,
            "review_text": "Unforgettable day with a great guide.",
            "tour": tour,
            "is_approved": True,
        }
        fields.update(overrides)
        return Review.objects.create(**fields)

    return factory


def _payload(tour_obj, **overrides):
    payload = {
        "name": "Greta Guest",
        "email": "Greta@Example.com",
        "rating": 4,
        "review_text": "Great guide and very well organised.",
        "tour": tour_obj.pk,
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
def test_submit_review_auto_approved_by_default(api_client, tour, settings):
    settings.REVIEWS_AUTO_APPROVE = True

    response = api_client.post("/api/reviews/", _payload(tour), format="json")

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["is_approved"] is True
    assert "email" not in data
    assert Review.objects.get().email == "greta@example.com"


@pytest.mark.django_db
def test_moderation_mode_holds_new_reviews(api_client, tour, settings):
    settings.REVIEWS_AUTO_APPROVE = False

    api_client.post("/api/reviews/", _payload(tour), format="json")

    assert Review.objects.get().is_approved is False
    public = api_client.get("/api/reviews/", {"tourId": tour.pk}).json()["data"]
    assert public["reviews"] == []


@pytest.mark.django_db
def test_duplicate_review_conflicts(api_client, tour):
    api_client.post("/api/reviews/", _payload(tour), format="json")

    response = api_client.post("/api/reviews/", _payload(tour, email="greta@example.com "), format="json")

    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "You have already reviewed this tour."}
    assert Review.objects.count() == 1


@pytest.mark.django_db
def test_same_email_may_review_another_tour(api_client, tour, make_tour):
    other = make_tour(title="Karnak by Night")
    api_client.post("/api/reviews/", _payload(tour), format="json")

    response = api_client.post("/api/reviews/", _payload(other), format="json")

    assert response.status_code == 201


@pytest.mark.django_db
def test_database_rejects_duplicate_pairs(make_review):
    make_review()

    with pytest.raises(IntegrityError):
        make_review(name="Second Attempt")


@pytest.mark.django_db
def test_review_tour_reference_is_checked(api_client, tour):
    malformed = api_client.post("/api/reviews/", _payload(tour, tour="not-an-id"), format="json")
    missing = api_client.post("/api/reviews/", _payload(tour, tour=424242), format="json")

    assert malformed.status_code == 400
    assert malformed.json()["errors"] == [{"field": "tour", "message": "Invalid tour id."}]
    assert missing.status_code == 404


@pytest.mark.django_db
def test_review_validation(api_client, tour):
    response = api_client.post(
        "/api/reviews/",
        _payload(tour, rating=6, review_text="Too short", name="G"),
        format="json",
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"rating", "review_text", "name"}


@pytest.mark.django_db
def test_public_list_shows_approved_reviews_with_stats(api_client, tour, make_review):
    make_review(email="a@example.com", rating=5)
    make_review(email="b@example.com", rating=4)
    make_review(email="c@example.com", rating=4)
    make_review(email="d@example.com", rating=1, is_approved=False)

    data = api_client.get("/api/reviews/", {"tourId": tour.pk}).json()["data"]

    assert len(data["reviews"]) == 3
    # 13 / 3 = 4.333...
    assert data["stats"] == {"averageRating": 4.3, "totalReviews": 3}
    assert data["pagination"]["total"] == 3


@pytest.mark.django_db
def test_stats_round_half_up(api_client, tour, make_review):
    make_review(email="a@example.com", rating=5)
    make_review(email="b@example.com", rating=4)
    make_review(email="c@example.com", rating=4)
    make_review(email="d@example.com", rating=4)

    stats = api_client.get("/api/reviews/", {"tourId": tour.pk}).json()["data"]["stats"]

    assert stats["averageRating"] == 4.3


@pytest.mark.django_db
def test_stats_without_reviews(api_client, tour):
    stats = api_client.get("/api/reviews/", {"tourId": tour.pk}).json()["data"]["stats"]

    assert stats == {"averageRating": 0, "totalReviews": 0}


@pytest.mark.django_db
def test_list_without_tour_has_no_stats(api_client, make_review):
    make_review()

    data = api_client.get("/api/reviews/").json()["data"]

    assert "stats" not in data


@pytest.mark.django_db
def test_malformed_tour_filter_is_400(api_client):
    response = api_client.get("/api/reviews/", {"tourId": "abc"})

    assert response.status_code == 400


@pytest.mark.django_db
@pytest.mark.parametrize("value", ["false", "all"])
def test_moderation_queue_is_admin_only(api_client, value):
    response = api_client.get("/api/reviews/", {"isApproved": value})

    assert response.status_code == 403


@pytest.mark.django_db
def test_admin_sees_moderation_queue(admin_client, make_review):
    make_review(email="a@example.com")
    make_review(email="b@example.com", is_approved=False)

    pending = admin_client.get("/api/reviews/", {"isApproved": "false"}).json()["data"]["reviews"]
    everything = admin_client.get("/api/reviews/", {"isApproved": "all"}).json()["data"]["reviews"]

    assert [review["email"] for review in pending] == ["b@example.com"]
    assert len(everything) == 2


@pytest.mark.django_db
def test_admin_moderates_and_deletes(admin_client, api_client, make_review):
    review = make_review(is_approved=False)

    response = admin_client.patch(f"/api/reviews/{review.pk}/", {"is_approved": True}, format="json")
    assert response.status_code == 200
    assert response.json()["data"]["is_approved"] is True

    assert api_client.delete(f"/api/reviews/{review.pk}/").status_code == 401
    assert admin_client.delete(f"/api/reviews/{review.pk}/").status_code == 200
    assert not Review.objects.exists()


@pytest.mark.django_db
def test_deleting_a_tour_removes_its_reviews(tour, make_review):
    make_review()

    tour.delete()

    assert not Review.objects.exists()
