# studyhub/adapters/inbound/api/v1/endpoints/user_endpoint.py (async version)

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from studyhub.shared.utils.error_responses import unauthorized_errors
from studyhub.shared.utils.success_responses import user_success
from studyhub.adapters.outbound.persistence.models.user_model import User
from studyhub.adapters.inbound.api.deps import (
    get_current_user,
    get_optional_current_user,
)
from studyhub.application.dtos.user_dto import SessionOutput, UserOutput

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/user",
    tags=["User"],
)


@router.get(
    "/me",
    response_model=UserOutput,
    summary="Get My Data - Logged in user data",
    description="Returns the authenticated user data via JWT token (header or cookie).",
    responses={**user_success, **unauthorized_errors}
)
async def get_my_data(
        current_user: User = Depends(get_current_user),
):
    return current_user


@router.get(
    "/session",
    response_model=SessionOutput,
    summary="Current session",
    description="Tells whether the request is authenticated. Never answers 401.",
)
async def get_session_state(
        current_user: Optional[User] = Depends(get_optional_current_user),
):
    """
    Sessão opcional: requisições anônimas ou com token inválido recebem
    `authenticated: false` em vez de erro.
    """
    if current_user is None:
        return SessionOutput(authenticated=False)
    return SessionOutput(authenticated=True, user=UserOutput.model_validate(current_user))
