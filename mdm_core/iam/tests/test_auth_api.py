import pytest
from rest_framework.test import APIClient

PASSWORD = "pass12345"

pytestmark = pytest.mark.django_db


def test_login_sets_cookies_and_returns_user(physician, settings):
    c = APIClient()
    res = c.post("/api/auth/login", {"email": "HOUSE@example.com", "password": PASSWORD}, format="json")
    assert res.status_code == 200

    body = res.json()
    assert body["user"]["id"] == physician.id
    assert body["user"]["role"] == "Physician"
    assert body["access"]

    assert settings.SIMPLE_JWT["AUTH_COOKIE"] in res.cookies
    assert settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"] in res.cookies


def test_cookie_session_reaches_api(physician):
    c = APIClient()
    c.post("/api/auth/login", {"email": "house@example.com", "password": PASSWORD}, format="json")

    res = c.get("/api/auth/session")
    assert res.status_code == 200
    assert res.json()["user"]["email"] == "house@example.com"


def test_login_wrong_password_is_401(physician):
    res = APIClient().post("/api/auth/login", {"email": "house@example.com", "password": "nope"}, format="json")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid email or password"
    assert res["WWW-Authenticate"].startswith("Bearer")


def test_login_ignores_a_stale_access_cookie(physician, settings):
    c = APIClient()
    c.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]] = "not-a-jwt"
    res = c.post("/api/auth/login", {"email": "house@example.com", "password": PASSWORD}, format="json")
    assert res.status_code == 200


def test_refresh_reissues_tokens_from_cookie(physician, settings):
    c = APIClient()
    c.post("/api/auth/login", {"email": "house@example.com", "password": PASSWORD}, format="json")

    res = c.post("/api/auth/refresh")
    assert res.status_code == 200
    assert settings.SIMPLE_JWT["AUTH_COOKIE"] in res.cookies


def test_refresh_without_token_is_401():
    res = APIClient().post("/api/auth/refresh")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "not_authenticated"


def test_logout_clears_cookies(physician_client, settings):
    res = physician_client.post("/api/auth/logout")
    assert res.status_code == 200
    assert res.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]].value == ""
