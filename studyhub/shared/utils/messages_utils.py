# studyhub/shared/utils/messages_utils.py

"""
Multilingual message catalogue for validation and API feedback.

Keeps every user-facing validation message in one place so the API can
answer in the caller's language (i18n).
"""

from typing import Dict

DEFAULT_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    # Password validation
    "password_empty": {
        "pt": "Senha é obrigatória.",
        "en": "Password is required."
    },
    "password_too_short": {
        "pt": "Senha deve ter pelo menos {min} caracteres.",
        "en": "Password must be at least {min} characters long."
    },
    "password_too_long": {
        "pt": "Senha não pode exceder {max} caracteres.",
        "en": "Password must not exceed {max} characters."
    },
    "password_missing_uppercase": {
        "pt": "Senha deve conter pelo menos uma letra maiúscula.",
        "en": "Password must contain at least one uppercase letter."
    },
    "password_missing_lowercase": {
        "pt": "Senha deve conter pelo menos uma letra minúscula.",
        "en": "Password must contain at least one lowercase letter."
    },
    "password_missing_number": {
        "pt": "Senha deve conter pelo menos um número.",
        "en": "Password must contain at least one number."
    },
    "password_missing_special": {
        "pt": "Senha deve conter pelo menos um caractere especial.",
        "en": "Password must contain at least one special character."
    },
    "password_common_pattern": {
        "pt": "Senha contém padrões comuns e não é segura.",
        "en": "Password contains common patterns and is not secure."
    },
    "password_sequential": {
        "pt": "Senha não deve conter caracteres sequenciais.",
        "en": "Password should not contain sequential characters."
    },
    "password_repeated": {
        "pt": "Senha não deve conter mais de 2 caracteres idênticos consecutivos.",
        "en": "Password should not contain more than 2 consecutive identical characters."
    },
    "password_mismatch": {
        "pt": "As senhas não coincidem.",
        "en": "Passwords do not match."
    },
    "password_too_weak": {
        "pt": "Senha é muito fraca.",
        "en": "Password is too weak."
    },

    # Email validation
    "email_required": {
        "pt": "E-mail é obrigatório.",
        "en": "Email is required."
    },
    "email_invalid": {
        "pt": "Informe um e-mail válido.",
        "en": "Please enter a valid email address."
    },
    "email_too_short": {
        "pt": "E-mail deve ter pelo menos {min} caracteres.",
        "en": "Email must be at least {min} characters long."
    },
    "email_too_long": {
        "pt": "E-mail não pode exceder {max} caracteres.",
        "en": "Email must not exceed {max} characters."
    },
    "email_format": {
        "pt": "Formato de e-mail inválido.",
        "en": "Email format is not valid."
    },

    # Name validation
    "name_required": {
        "pt": "Nome é obrigatório.",
        "en": "Name is required."
    },
    "name_too_short": {
        "pt": "Nome deve ter pelo menos {min} caracteres.",
        "en": "Name must be at least {min} characters long."
    },
    "name_too_long": {
        "pt": "Nome não pode exceder {max} caracteres.",
        "en": "Name must not exceed {max} characters."
    },
    "name_invalid_chars": {
        "pt": "Nome pode conter apenas letras, espaços, hífens e apóstrofos.",
        "en": "Name can only contain letters, spaces, hyphens, and apostrophes."
    },
    "name_invalid_edges": {
        "pt": "Nome não pode começar ou terminar com caracteres especiais.",
        "en": "Name cannot start or end with special characters."
    },
    "name_too_many_spaces": {
        "pt": "Nome contém espaços consecutivos demais.",
        "en": "Name contains too many consecutive spaces."
    },

    # General
    "generic_invalid_credentials": {
        "pt": "Credenciais inválidas.",
        "en": "Invalid credentials."
    },
    "validation_failed": {
        "pt": "Falha na validação.",
        "en": "Validation failed."
    },
    "email_already_registered": {
        "pt": "E-mail já cadastrado.",
        "en": "Email already registered."
    },
}


def get_message(key: str, language: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """
    Return the formatted message for a key in the requested language.

    Args:
        key (str): Message key.
        language (str): Language code ('en', 'pt').
        kwargs: Values interpolated into the message.

    Returns:
        str: Final message.
    """
    try:
        template = MESSAGES[key][language]
    except KeyError:
        template = MESSAGES.get(key, {}).get(DEFAULT_LANGUAGE, f"[Message not found: {key}]")

    return template.format(**kwargs)
