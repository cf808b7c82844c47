# studyhub/test/schemas/test_user_dto.py

# Para rodar o script
# pytest studyhub/test/schemas/test_user_dto.py -v

from datetime import datetime, timezone

from studyhub.application.dtos.user_dto import (
    AuthResponse,
    RefreshTokenRequest,
    UserOutput,
    UserRegister,
)
from studyhub.test.utils.fakes import make_user


def test_register_accepts_camel_case_confirmation():
    dto = UserRegister(name="Ada", email="ada@example.com", password="x", confirmPassword="y")

    assert dto.confirm_password == "y"
    assert dto.to_validation_dict()["confirmPassword"] == "y"


def test_register_accepts_field_name_too():
    dto = UserRegister(name="Ada", email="ada@example.com", password="x", confirm_password="x")
    assert dto.confirm_password == "x"


def test_register_fields_default_to_empty():
    dto = UserRegister()
    assert dto.to_validation_dict() == {"name": "", "email": "", "password": "", "confirmPassword": ""}


def test_user_output_never_exposes_password():
    user = make_user(password="secret-hash")

    output = UserOutput.model_validate(user)

    assert "password" not in output.model_dump()
    assert output.id == user.id
    assert output.interests == []


def test_auth_response_defaults_to_bearer():
    response = AuthResponse(
        user=UserOutput.model_validate(make_user()),
        message="Login successful",
        access_token="a",
        refresh_token="r",
        expires_at=datetime.now(timezone.utc),
    )
    assert response.token_type == "bearer"


def test_refresh_request_is_optional():
    assert RefreshTokenRequest().refresh_token is None
