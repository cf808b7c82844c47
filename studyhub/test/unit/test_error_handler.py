# studyhub/test/unit/test_error_handler.py

# Para rodar o script
# pytest studyhub/test/unit/test_error_handler.py -v

import json

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from studyhub.domain.exceptions import (
    DatabaseOperationException,
    InvalidCredentialsException,
    TokenException,
)
from studyhub.shared.middleware.error_handler_middleware import ErrorHandlerMiddleware, domain_exception_response


def _body(response) -> dict:
    return json.loads(response.body)


def test_server_errors_hide_internal_message():
    error = DatabaseOperationException("connection refused on 10.0.0.5", original_error=RuntimeError("boom"))

    response = domain_exception_response(error)

    assert response.status_code == 500
    assert _body(response) == {
        "success": False,
        "error": "Internal server error.",
        "code": "DATABASE_ERROR",
        "details": None,
    }


def test_unauthorized_adds_bearer_challenge():
    response = domain_exception_response(InvalidCredentialsException())

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_token_error_can_clear_cookies():
    cleared = domain_exception_response(TokenException("REFRESH_TOKEN_INVALID", clear_cookies=True))
    kept = domain_exception_response(TokenException("TOKEN_INVALID"))

    assert any(b"refresh_token=" in value for key, value in cleared.raw_headers if key == b"set-cookie")
    assert not any(key == b"set-cookie" for key, _ in kept.raw_headers)


def test_unknown_token_code_falls_back_to_generic_message():
    error = TokenException("SOMETHING_ELSE")
    assert error.message == "Invalid or expired token."
    assert error.internal_code == "SOMETHING_ELSE"


@pytest.mark.asyncio
async def test_unexpected_errors_become_500():
    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret detail")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_SERVER_ERROR"
    assert "secret detail" not in response.text
