# studyhub/shared/utils/error_responses.py

# Respostas de erro genéricas
common_errors = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "Internal server error.",
                    "code": "INTERNAL_SERVER_ERROR",
                    "details": None
                }
            }
        }
    }
}

# Erros de autenticação
unauthorized_errors = {
    401: {
        "description": "Unauthorized (missing, invalid or revoked token)",
        "content": {
            "application/json": {
                "examples": {
                    "missing_token": {
                        "summary": "Missing Token",
                        "value": {"success": False, "error": "Access token is required.",
                                  "code": "TOKEN_MISSING", "details": None}
                    },
                    "revoked_token": {
                        "summary": "Revoked Token",
                        "value": {"success": False, "error": "Token has been revoked.",
                                  "code": "TOKEN_REVOKED", "details": None}
                    },
                    "invalid_token": {
                        "summary": "Invalid Token",
                        "value": {"success": False, "error": "Invalid or expired token.",
                                  "code": "TOKEN_INVALID", "details": None}
                    }
                }
            }
        }
    },
    **common_errors
}

# Erros para registro e login
auth_errors = {
    400: {
        "description": "Bad Request (validation failed or weak password)",
        "content": {
            "application/json": {
                "examples": {
                    "validation_error": {
                        "summary": "Validation Error",
                        "value": {
                            "success": False,
                            "error": "Validation failed.",
                            "code": "VALIDATION_ERROR",
                            "details": [{"field": "confirmPassword", "message": "Passwords do not match."}]
                        }
                    },
                    "weak_password": {
                        "summary": "Weak Password",
                        "value": {
                            "success": False,
                            "error": "Password is too weak.",
                            "code": "WEAK_PASSWORD",
                            "details": {"strength": "weak", "feedback": ["Add special characters"]}
                        }
                    }
                }
            }
        }
    },
    401: {
        "description": "Unauthorized (invalid credentials or refresh token)",
        "content": {
            "application/json": {
                "examples": {
                    "invalid_credentials": {
                        "summary": "Invalid Credentials",
                        "value": {"success": False, "error": "Invalid credentials.",
                                  "code": "INVALID_CREDENTIALS", "details": None}
                    },
                    "invalid_refresh_token": {
                        "summary": "Invalid Refresh Token",
                        "value": {"success": False, "error": "Invalid or expired refresh token.",
                                  "code": "REFRESH_TOKEN_INVALID", "details": None}
                    }
                }
            }
        }
    },
    409: {
        "description": "Conflict (Email already in use)",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "Email already registered.",
                    "code": "EMAIL_EXISTS",
                    "details": None
                }
            }
        }
    },
    429: {
        "description": "Too many requests",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": "Too many requests. Please try again later.",
                    "code": "RATE_LIMIT_EXCEEDED",
                    "details": {"retry_after": 900}
                }
            }
        }
    },
    **common_errors
}
