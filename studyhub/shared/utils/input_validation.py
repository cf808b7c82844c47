# studyhub/shared/utils/input_validation.py

import regex
import re
from dataclasses import dataclass
from typing import Optional, Tuple, List, Dict, Any

from studyhub.domain.services.password_strength_service import PasswordStrengthService
from studyhub.shared.utils.messages_utils import DEFAULT_LANGUAGE, get_message


@dataclass(frozen=True)
class FieldError:
    """A validation failure attributed to one input field."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class InputValidator:
    """
    Validation of user-supplied credentials and profile fields.

    Checks are pure: each validate_* method returns its verdict and messages
    and never raises. The use cases decide what a failure means.
    """

    # ─────────────────────────────────────────────────────────────
    # Limits
    MIN_NAME_LENGTH = 2
    MAX_NAME_LENGTH = 50
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_LENGTH = 128
    MIN_EMAIL_LENGTH = 5
    MAX_EMAIL_LENGTH = 254
    MAX_EMAIL_LOCAL_LENGTH = 64
    MAX_EMAIL_DOMAIN_LENGTH = 253

    # ─────────────────────────────────────────────────────────────
    # Regular expressions

    # Name (NAME_PATTERN):
    # - \p{L}: any letter (any script, wider than ASCII a-z)
    # - \p{M}: combining marks (accents)
    # - whitespace, hyphen (-) and apostrophe (')
    NAME_PATTERN = regex.compile(
        r"[\p{L}\p{M}\s'-]+",
        flags=regex.UNICODE
    )
    NAME_EDGE_PATTERN = regex.compile(r"^[-'\s]|[-'\s]$")
    NAME_SPACE_RUN_PATTERN = regex.compile(r"\s{4,}")

    # E-mail (EMAIL_PATTERN):
    # - letters, digits, dots, underscores, percent, plus and hyphens in the local part
    # - letters, digits, dots and hyphens in the domain, alphabetic TLD
    # NAME_PATTERN and EMAIL_PATTERN are applied with fullmatch (no trailing newline)
    EMAIL_PATTERN = re.compile(
        r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    )

    # Substrings that make a password guessable (case-insensitive)
    COMMON_PASSWORD_PATTERNS = (
        re.compile(r"123456"),
        re.compile(r"password", re.IGNORECASE),
        re.compile(r"qwerty", re.IGNORECASE),
        re.compile(r"admin", re.IGNORECASE),
        re.compile(r"user", re.IGNORECASE),
        re.compile(r"login", re.IGNORECASE),
    )

    LOWERCASE_PATTERN = re.compile(r"[a-z]")
    UPPERCASE_PATTERN = re.compile(r"[A-Z]")
    DIGIT_PATTERN = re.compile(r"[0-9]")
    SPECIAL_PATTERN = re.compile(r"[^a-zA-Z0-9]")

    # ─────────────────────────────────────────────────────────────

    @classmethod
    def validate_password(cls, password: str, language: str = DEFAULT_LANGUAGE) -> Tuple[bool, Optional[List[str]]]:
        """
        Check a password against the acceptance policy.

        Every rule is evaluated so the caller gets all the reasons at once.

        Returns:
            (True, None) when accepted, otherwise (False, list of messages)
        """
        errors: List[str] = []

        if not password:
            return False, [get_message("password_empty", language)]

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            errors.append(get_message("password_too_short", language, min=cls.MIN_PASSWORD_LENGTH))
        if len(password) > cls.MAX_PASSWORD_LENGTH:
            errors.append(get_message("password_too_long", language, max=cls.MAX_PASSWORD_LENGTH))
        if not cls.LOWERCASE_PATTERN.search(password):
            errors.append(get_message("password_missing_lowercase", language))
        if not cls.UPPERCASE_PATTERN.search(password):
            errors.append(get_message("password_missing_uppercase", language))
        if not cls.DIGIT_PATTERN.search(password):
            errors.append(get_message("password_missing_number", language))
        if not cls.SPECIAL_PATTERN.search(password):
            errors.append(get_message("password_missing_special", language))
        if any(pattern.search(password) for pattern in cls.COMMON_PASSWORD_PATTERNS):
            errors.append(get_message("password_common_pattern", language))
        if PasswordStrengthService.has_sequential_run(password):
            errors.append(get_message("password_sequential", language))
        if PasswordStrengthService.has_repeated_run(password):
            errors.append(get_message("password_repeated", language))

        if errors:
            return False, errors

        return True, None

    @classmethod
    def normalize_email(cls, email: str) -> str:
        return (email or "").strip().lower()

    @classmethod
    def validate_email(cls, email: str, language: str = DEFAULT_LANGUAGE) -> Tuple[bool, Optional[str]]:
        if not email:
            return False, get_message("email_required", language)

        if len(email) < cls.MIN_EMAIL_LENGTH:
            return False, get_message("email_too_short", language, min=cls.MIN_EMAIL_LENGTH)

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, get_message("email_too_long", language, max=cls.MAX_EMAIL_LENGTH)

        if not cls.EMAIL_PATTERN.fullmatch(email):
            return False, get_message("email_invalid", language)

        parts = email.split("@")
        if len(parts) != 2:
            return False, get_message("email_format", language)

        local_part, domain = parts
        if (
                len(local_part) > cls.MAX_EMAIL_LOCAL_LENGTH
                or local_part.startswith(".")
                or local_part.endswith(".")
                or ".." in local_part
                or len(domain) > cls.MAX_EMAIL_DOMAIN_LENGTH
                or domain.startswith("-")
                or domain.endswith("-")
        ):
            return False, get_message("email_format", language)

        return True, None

    @classmethod
    def validate_name(cls, name: str, language: str = DEFAULT_LANGUAGE) -> Tuple[bool, Optional[str]]:
        if not name:
            return False, get_message("name_required", language)

        if len(name) < cls.MIN_NAME_LENGTH:
            return False, get_message("name_too_short", language, min=cls.MIN_NAME_LENGTH)

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, get_message("name_too_long", language, max=cls.MAX_NAME_LENGTH)

        if not cls.NAME_PATTERN.fullmatch(name):
            return False, get_message("name_invalid_chars", language)

        if cls.NAME_EDGE_PATTERN.search(name):
            return False, get_message("name_invalid_edges", language)

        if cls.NAME_SPACE_RUN_PATTERN.search(name):
            return False, get_message("name_too_many_spaces", language)

        return True, None

    @classmethod
    def validate_registration(cls, data: Dict[str, Any], language: str = DEFAULT_LANGUAGE) -> List[FieldError]:
        """
        Validate a registration form.

        Expects the keys name, email, password and confirmPassword. A password
        mismatch is reported against confirmPassword.
        """
        errors: List[FieldError] = []

        is_valid, error_msg = cls.validate_name(data.get("name") or "", language)
        if not is_valid:
            errors.append(FieldError("name", error_msg))

        is_valid, error_msg = cls.validate_email(data.get("email") or "", language)
        if not is_valid:
            errors.append(FieldError("email", error_msg))

        password = data.get("password") or ""
        is_valid, password_errors = cls.validate_password(password, language)
        if not is_valid:
            errors.extend(FieldError("password", message) for message in password_errors)

        if password != (data.get("confirmPassword") or ""):
            errors.append(FieldError("confirmPassword", get_message("password_mismatch", language)))

        return errors

    @classmethod
    def validate_login(cls, data: Dict[str, Any], language: str = DEFAULT_LANGUAGE) -> List[FieldError]:
        errors: List[FieldError] = []

        is_valid, error_msg = cls.validate_email(data.get("email") or "", language)
        if not is_valid:
            errors.append(FieldError("email", error_msg))

        if not data.get("password"):
            errors.append(FieldError("password", get_message("password_empty", language)))

        return errors
