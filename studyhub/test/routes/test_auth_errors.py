# studyhub/test/routes/test_auth_errors.py

# Para rodar o script
# pytest studyhub/test/routes/test_auth_errors.py -v

import pytest
from httpx import AsyncClient

from studyhub.test.utils.fakes import TEST_PASSWORD


def _registration(**overrides) -> dict:
    data = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": TEST_PASSWORD,
        "confirmPassword": TEST_PASSWORD,
    }
    data.update(overrides)
    return data


def _assert_envelope(body: dict, code: str):
    assert body["success"] is False
    assert body["code"] == code
    assert body["error"]


@pytest.mark.asyncio
async def test_duplicate_email_returns_409(async_client: AsyncClient, registered_user):
    response = await async_client.post("/api/v1/auth/register", json=_registration(email="ADA@example.com"))

    assert response.status_code == 409
    _assert_envelope(response.json(), "EMAIL_EXISTS")


@pytest.mark.asyncio
async def test_password_mismatch_is_reported_on_confirmation(async_client: AsyncClient):
    response = await async_client.post("/api/v1/auth/register", json=_registration(confirmPassword="Other!Pass9"))

    assert response.status_code == 400
    body = response.json()
    _assert_envelope(body, "VALIDATION_ERROR")
    assert body["details"] == [{"field": "confirmPassword", "message": "Passwords do not match."}]


@pytest.mark.asyncio
async def test_consecutive_dots_in_email_are_rejected(async_client: AsyncClient):
    response = await async_client.post("/api/v1/auth/register", json=_registration(email="a..b@example.com"))

    assert response.status_code == 400
    assert [d["field"] for d in response.json()["details"]] == ["email"]


@pytest.mark.asyncio
async def test_policy_violations_are_listed(async_client: AsyncClient):
    response = await async_client.post(
        "/api/v1/auth/register",
        json=_registration(password="password", confirmPassword="password"),
    )

    assert response.status_code == 400
    details = response.json()["details"]
    assert {d["field"] for d in details} == {"password"}
    assert len(details) > 1


@pytest.mark.asyncio
async def test_wrong_body_type_uses_same_envelope(async_client: AsyncClient):
    response = await async_client.post("/api/v1/auth/register", json={"name": ["not", "a", "string"]})

    assert response.status_code == 400
    body = response.json()
    _assert_envelope(body, "VALIDATION_ERROR")
    assert body["details"][0]["field"] == "name"


@pytest.mark.asyncio
async def test_login_errors_are_identical(async_client: AsyncClient, registered_user):
    unknown = await async_client.post("/api/v1/auth/login", json={
        "email": "nobody@example.com",
        "password": TEST_PASSWORD,
    })
    wrong = await async_client.post("/api/v1/auth/login", json={
        "email": "ada@example.com",
        "password": "Wr0ng!Pass9",
    })

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()
    _assert_envelope(unknown.json(), "INVALID_CREDENTIALS")


@pytest.mark.asyncio
async def test_me_without_token(async_client: AsyncClient):
    response = await async_client.get("/api/v1/user/me")

    assert response.status_code == 401
    _assert_envelope(response.json(), "TOKEN_MISSING")


@pytest.mark.asyncio
async def test_me_with_refresh_token_is_rejected(async_client: AsyncClient, registered_user):
    _, registered = registered_user

    response = await async_client.get(
        "/api/v1/user/me",
        headers={"Authorization": f"Bearer {registered['refresh_token']}"},
    )

    assert response.status_code == 401
    _assert_envelope(response.json(), "TOKEN_INVALID")


@pytest.mark.asyncio
async def test_unknown_route_returns_404(async_client: AsyncClient):
    response = await async_client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
