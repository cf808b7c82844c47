# studyhub/test/unit/test_input_validation.py

# Para rodar o script
# pytest studyhub/test/unit/test_input_validation.py -v

import pytest

from studyhub.shared.utils.input_validation import FieldError, InputValidator
from studyhub.shared.utils.messages_utils import get_message


class TestPasswordPolicy:

    def test_strong_password_is_accepted(self):
        assert InputValidator.validate_password("Str0ng!Pass9") == (True, None)

    def test_passw0rd_passes_the_policy(self):
        is_valid, errors = InputValidator.validate_password("Passw0rd!")
        assert is_valid, errors

    def test_empty_password(self):
        assert InputValidator.validate_password("") == (False, [get_message("password_empty")])

    def test_every_failed_rule_is_reported(self):
        is_valid, errors = InputValidator.validate_password("aaa")

        assert not is_valid
        assert get_message("password_too_short", min=8) in errors
        assert get_message("password_missing_uppercase") in errors
        assert get_message("password_missing_number") in errors
        assert get_message("password_missing_special") in errors
        assert get_message("password_repeated") in errors

    def test_too_long(self):
        is_valid, errors = InputValidator.validate_password("Xy7!" * 33)
        assert not is_valid
        assert get_message("password_too_long", max=128) in errors

    @pytest.mark.parametrize("password", [
        "My123456!Key",
        "MyPassWord9!",
        "Qwerty!9Zz",
        "Admin!9Zzx",
        "SuperUser!9",
        "Login!9Zzx",
    ])
    def test_common_substrings_are_rejected(self, password):
        is_valid, errors = InputValidator.validate_password(password)
        assert not is_valid
        assert get_message("password_common_pattern") in errors

    @pytest.mark.parametrize("password", ["Xabc!9Zzq", "Kq!789Zzw", "QbCD!9zwx"])
    def test_ascending_runs_are_rejected(self, password):
        is_valid, errors = InputValidator.validate_password(password)
        assert not is_valid
        assert get_message("password_sequential") in errors

    def test_three_identical_characters_are_rejected(self):
        is_valid, errors = InputValidator.validate_password("Zq!9xxxWm")
        assert not is_valid
        assert get_message("password_repeated") in errors

    def test_two_identical_characters_are_allowed(self):
        assert InputValidator.validate_password("Zq!9xxWm")[0]


class TestEmailPolicy:

    @pytest.mark.parametrize("email", ["ada@example.com", "a.b+tag@uni.edu.br", "a_b-c@sub-domain.io"])
    def test_valid(self, email):
        assert InputValidator.validate_email(email) == (True, None)

    @pytest.mark.parametrize("email", [
        "",
        "a@b",
        "not-an-email",
        "a..b@example.com",
        ".ab@example.com",
        "ab.@example.com",
        "ab@-example.com",
        "ab@example.com-",
        "a" * 65 + "@example.com",
        "ab@" + "d" * 250 + ".com",
        "ada@example.com\n",
        "ada@example.com\nx@example.com",
    ])
    def test_invalid(self, email):
        is_valid, message = InputValidator.validate_email(email)
        assert not is_valid
        assert message

    def test_normalize_email(self):
        assert InputValidator.normalize_email("  Ada@Example.COM ") == "ada@example.com"
        assert InputValidator.normalize_email(None) == ""


class TestNamePolicy:

    @pytest.mark.parametrize("name", ["Ada Lovelace", "O'Brien", "Jean-Luc", "José Ñúñez", "Zoë", "Иван Петров"])
    def test_valid(self, name):
        assert InputValidator.validate_name(name) == (True, None)

    @pytest.mark.parametrize("name, key", [
        ("", "name_required"),
        ("A", "name_too_short"),
        ("A" * 51, "name_too_long"),
        ("Ada99", "name_invalid_chars"),
        ("Ada_Lovelace", "name_invalid_chars"),
        ("-Ada", "name_invalid_edges"),
        ("Ada'", "name_invalid_edges"),
        (" Ada", "name_invalid_edges"),
        ("Ada\n", "name_invalid_edges"),
        ("Ada    Lovelace", "name_too_many_spaces"),
    ])
    def test_invalid(self, name, key):
        is_valid, message = InputValidator.validate_name(name)
        assert not is_valid
        assert message == get_message(key, min=2, max=50)

    def test_three_spaces_are_allowed(self):
        assert InputValidator.validate_name("Ada   Lovelace")[0]


class TestRegistrationForm:

    def _form(self, **overrides):
        data = {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "password": "Str0ng!Pass9",
            "confirmPassword": "Str0ng!Pass9",
        }
        data.update(overrides)
        return data

    def test_valid_form(self):
        assert InputValidator.validate_registration(self._form()) == []

    def test_mismatch_is_attributed_to_confirmation(self):
        errors = InputValidator.validate_registration(self._form(confirmPassword="Str0ng!Pass8"))

        assert errors == [FieldError("confirmPassword", get_message("password_mismatch"))]

    def test_consecutive_dots_email_is_rejected(self):
        errors = InputValidator.validate_registration(self._form(email="a..b@example.com"))

        assert [e.field for e in errors] == ["email"]

    def test_all_fields_reported_together(self):
        errors = InputValidator.validate_registration({})
        fields = {e.field for e in errors}

        assert fields == {"name", "email", "password"}

    def test_field_error_to_dict(self):
        assert FieldError("email", "bad").to_dict() == {"field": "email", "message": "bad"}


class TestLoginForm:

    def test_valid(self):
        assert InputValidator.validate_login({"email": "ada@example.com", "password": "x"}) == []

    def test_missing_fields(self):
        errors = InputValidator.validate_login({"email": "", "password": ""})
        assert [e.field for e in errors] == ["email", "password"]
