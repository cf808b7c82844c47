# studyhub/shared/utils/success_responses.py

_example_user = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "role": "student",
    "university": None,
    "program": None,
    "year": None,
    "avatar_url": None,
    "interests": [],
    "profile_completion": 0,
    "created_at": "2025-01-01T00:00:00",
    "updated_at": "2025-01-01T00:00:00"
}

# Respostas de sucesso genéricas
common_success = {
    200: {
        "description": "Request processed successfully",
        "content": {
            "application/json": {
                "example": {"message": "Operation completed successfully."}
            }
        }
    }
}

# Sucessos para autenticação
auth_success = {
    201: {
        "description": "User created and signed in",
        "content": {
            "application/json": {
                "example": {
                    "user": _example_user,
                    "message": "Account created successfully",
                    "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "token_type": "bearer",
                    "expires_at": "2025-01-01T00:15:00+00:00"
                }
            }
        }
    },
    **common_success
}

# Sucessos para usuários
user_success = {
    200: {
        "description": "Authenticated user data",
        "content": {
            "application/json": {
                "example": _example_user
            }
        }
    }
}
