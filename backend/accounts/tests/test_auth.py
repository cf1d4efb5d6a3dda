import pytest
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.authentication import issue_admin_token

User = get_user_model()


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def admin(db):
    return User.objects.create_admin(email="Admin@Example.com", password="secret123", name="Head Admin")


def _login(client, email="admin@example.com", password="secret123"):
    return client.post("/api/auth/verify/", {"email": email, "password": password}, format="json")


def test_login_returns_token_and_sets_cookie(client, admin):
    response = _login(client)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["admin"] == {"name": "Head Admin", "email": "admin@example.com"}
    token = AccessToken(body["data"]["token"])
    assert token["is_admin"] is True
    cookie = response.cookies[settings.ADMIN_TOKEN_COOKIE]
    assert cookie["httponly"]
    assert cookie["samesite"] == "Strict"


def test_login_with_wrong_password_is_rejected(client, admin):
    response = _login(client, password="nottheone")

    assert response.status_code == 401
    assert response["WWW-Authenticate"] == 'Bearer realm="api"'
    assert response.json() == {"success": False, "error": "Invalid email or password."}
    assert settings.ADMIN_TOKEN_COOKIE not in response.cookies


def test_login_with_unknown_email_is_rejected(client, admin):
    response = _login(client, email="nobody@example.com")

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid email or password."


def test_login_validates_payload(client, db):
    response = client.post("/api/auth/verify/", {"email": "nope", "password": "123"}, format="json")

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"email", "password"}


def test_check_reports_cookie_session(client, admin):
    assert client.get("/api/auth/check/").json()["data"] == {"authenticated": False}

    _login(client)
    response = client.get("/api/auth/check/")

    assert response.json()["data"] == {"authenticated": True}


def test_check_with_garbage_bearer_token_is_false(client, db):
    client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
    response = client.get("/api/auth/check/")

    assert response.status_code == 200
    assert response.json()["data"]["authenticated"] is False


def test_token_without_admin_claim_is_rejected(client, admin):
    token = str(AccessToken.for_user(admin))
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    response = client.get("/api/admin/users/")

    assert response.status_code == 401


def test_stale_cookie_does_not_break_public_requests(client, db):
    client.cookies[settings.ADMIN_TOKEN_COOKIE] = "expired.or.forged"

    response = client.get("/api/testimonials/")

    assert response.status_code == 200


def test_logout_clears_cookie(client, admin):
    _login(client)
    response = client.post("/api/auth/logout/")

    assert response.status_code == 200
    assert response.cookies[settings.ADMIN_TOKEN_COOKIE].value == ""
    assert client.get("/api/auth/check/").json()["data"]["authenticated"] is False


def test_password_exists_flag(client, db):
    assert client.get("/api/auth/password/").json()["data"] == {"exists": False}
    User.objects.create_admin(email="first@example.com", password="secret123")
    assert client.get("/api/auth/password/").json()["data"] == {"exists": True}


def test_password_change_requires_admin(client, admin):
    response = client.post(
        "/api/auth/password/",
        {"old_password": "secret123", "new_password": "brandnew1"},
        format="json",
    )
    assert response.status_code == 401


def test_password_change_updates_password(client, admin):
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_admin_token(admin)}")
    response = client.post(
        "/api/auth/password/",
        {"old_password": "secret123", "new_password": "brandnew1"},
        format="json",
    )

    assert response.status_code == 200
    admin.refresh_from_db()
    assert admin.check_password("brandnew1")


def test_password_change_rejects_wrong_current_password(client, admin):
    client.force_authenticate(user=admin)
    response = client.post(
        "/api/auth/password/",
        {"old_password": "wrongpass", "new_password": "brandnew1"},
        format="json",
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "old_password"


def test_create_admin_command_creates_and_resets(db):
    call_command("create_admin", email="Ops@Example.com", password="first-pass", name="Ops")
    user = User.objects.get(email="ops@example.com")
    assert user.is_staff and user.check_password("first-pass")

    call_command("create_admin", email="ops@example.com", password="second-pass")
    user.refresh_from_db()
    assert user.check_password("second-pass")
    assert User.objects.filter(email="ops@example.com").count() == 1
