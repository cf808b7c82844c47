# studyhub/adapters/inbound/api/v1/endpoints/auth_endpoint.py

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status

from studyhub.adapters.inbound.api.deps import (
    get_access_token,
    get_auth_service,
    get_current_user,
)
from studyhub.adapters.outbound.persistence.models import User
from studyhub.adapters.outbound.security.jwt_cookies import cookie_manager
from studyhub.application.use_cases.auth_use_cases import AsyncAuthService
from studyhub.application.dtos.user_dto import (
    AuthResponse,
    MessageOutput,
    PasswordStrengthOutput,
    PasswordStrengthRequest,
    RefreshTokenRequest,
    UserLogin,
    UserRegister,
)
from studyhub.shared.middleware.rate_limiting_middleware import auth_rate_limit
from studyhub.shared.utils.error_responses import auth_errors, common_errors, unauthorized_errors
from studyhub.shared.utils.success_responses import auth_success, common_success

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={404: {"description": "Not found"}}
)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates a student account and signs it in (tokens in the body and as cookies).",
    responses={**auth_success, **auth_errors}
)
@auth_rate_limit
async def register_user(
        request: Request,
        user_input: UserRegister,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    result = await service.register_user(user_input)
    cookie_manager.set_auth_cookies(response, result.access_token, result.refresh_token)
    return result


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Login user",
    description="Authenticates user credentials and returns a new token pair.",
    responses={**auth_success, **auth_errors}
)
@auth_rate_limit
async def login_user(
        request: Request,
        user_input: UserLogin,
        response: Response,
        service: AsyncAuthService = Depends(get_auth_service),
):
    result = await service.login_user(user_input)
    cookie_manager.set_auth_cookies(response, result.access_token, result.refresh_token)
    return result


@router.post(
    "/refresh",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Refresh authentication token",
    description=(
        "Consumes a refresh token (body `refresh_token` or the refresh cookie) and issues a new pair. "
        "A refresh token can only be used once."
    ),
    responses={**auth_success, **auth_errors}
)
async def refresh_token(
        request: Request,
        response: Response,
        refresh_data: Optional[RefreshTokenRequest] = Body(None),
        service: AsyncAuthService = Depends(get_auth_service),
):
    token = (refresh_data.refresh_token if refresh_data else None) \
        or cookie_manager.get_refresh_token_from_cookie(request)

    result = await service.refresh_tokens(token)
    cookie_manager.set_auth_cookies(response, result.access_token, result.refresh_token)
    return result


@router.post(
    "/logout",
    response_model=MessageOutput,
    status_code=status.HTTP_200_OK,
    summary="Logout user",
    description="Blacklists the current access token, revokes the refresh token and clears auth cookies.",
    responses={**common_success, **common_errors}
)
async def logout_user(
        request: Request,
        response: Response,
        refresh_data: Optional[RefreshTokenRequest] = Body(None),
        access_token: Optional[str] = Depends(get_access_token),
        service: AsyncAuthService = Depends(get_auth_service),
):
    refresh = (refresh_data.refresh_token if refresh_data else None) \
        or cookie_manager.get_refresh_token_from_cookie(request)

    await service.logout(access_token, refresh)
    cookie_manager.unset_jwt_cookies(response)
    return {"message": "Logout successful"}


@router.post(
    "/logout-all",
    response_model=MessageOutput,
    status_code=status.HTTP_200_OK,
    summary="Logout from all devices",
    description="Revokes every refresh token of the authenticated user.",
    responses={**common_success, **unauthorized_errors}
)
async def logout_all_devices(
        response: Response,
        current_user: User = Depends(get_current_user),
        service: AsyncAuthService = Depends(get_auth_service),
):
    await service.logout_all(current_user)
    cookie_manager.unset_jwt_cookies(response)
    return {"message": "Logged out from all devices successfully"}


@router.post(
    "/check-password-strength",
    response_model=PasswordStrengthOutput,
    status_code=status.HTTP_200_OK,
    summary="Check password strength",
    description="Scores a candidate password (0-9) and returns improvement hints.",
)
async def check_password_strength(
        data: PasswordStrengthRequest,
        service: AsyncAuthService = Depends(get_auth_service),
):
    analysis = service.check_password_strength(data.password)
    return PasswordStrengthOutput(score=analysis.score, strength=analysis.strength, feedback=analysis.feedback)
