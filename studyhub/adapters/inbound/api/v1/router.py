# studyhub/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
# Manter em ordem alfabética
from studyhub.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    user_endpoint
)

api_router = APIRouter()

# Incluir os routers dos endpoints
api_router.include_router(auth_endpoint.router)
api_router.include_router(user_endpoint.router)
