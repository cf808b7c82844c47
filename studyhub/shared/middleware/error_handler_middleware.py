# studyhub/shared/middleware/error_handler_middleware.py

from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError, HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from studyhub.adapters.outbound.security.jwt_cookies import cookie_manager
from studyhub.domain.exceptions import DomainException, TokenException
import logging

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, code: str, details: Any = None,
                   headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        headers=headers,
        content={
            "success": False,
            "error": message,
            "code": code,
            "details": details,
        },
    )


def domain_exception_response(e: DomainException) -> JSONResponse:
    # Erros 5xx nunca expõem a mensagem interna
    message = e.message if e.status_code < 500 else type(e).default_message
    headers = {"WWW-Authenticate": "Bearer"} if e.status_code == 401 else None
    response = error_response(e.status_code, message, e.internal_code, e.details, headers=headers)

    if isinstance(e, TokenException) and e.clear_cookies:
        cookie_manager.unset_jwt_cookies(response)
    return response


def request_validation_response(e: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", ()) if loc != "body"),
            "message": err.get("msg", ""),
        }
        for err in e.errors()
    ]
    return error_response(400, "Validation failed.", "VALIDATION_ERROR", details)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"RequestValidationError on {request.url.path}")
    return request_validation_response(exc)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        # 1. Exceções customizadas do domínio
        except DomainException as e:
            if e.status_code >= 500:
                original = getattr(e, "original_error", None)
                logger.error(f"[{e.internal_code}] {e.message} | original: {original!r}")
            else:
                logger.warning(f"[{e.internal_code}] DomainException: {e.message}")
            return domain_exception_response(e)

        # 2. Erros de validação (Pydantic/FastAPI)
        except RequestValidationError as e:
            logger.warning("RequestValidationError")
            return request_validation_response(e)

        # 3. Exceções HTTP padrão (como HTTPException 404, etc.)
        except HTTPException as e:
            logger.warning(f"HTTPException: {e.detail}")
            return error_response(e.status_code, str(e.detail), "HTTP_EXCEPTION")

        # 4. Erros inesperados
        except Exception:
            logger.exception(f"Erro inesperado em {request.url.path}")
            return error_response(500, "Internal server error.", "INTERNAL_SERVER_ERROR")
