import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from .exceptions import InternalServerError

logger = logging.getLogger("ledgerapi")


def _describe(request: Request) -> str:
    client = request.client.host if request.client else "-"
    return f"{request.method} {request.url.path} from {client}"


def _error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        "success": False,
        "error": {"code": code, "message": message, "details": details or {}},
    }


async def handle_base_api_exception(request: Request, exc) -> JSONResponse:
    """BadRequestError / NotFoundError 등 서비스 계층 예외"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"[{exc.error_code}] {_describe(request)} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.detail)


async def handle_http_exception(request: Request, exc) -> JSONResponse:
    """라우팅 실패(404, 405) 등 프레임워크가 던지는 HTTP 예외"""
    logger.warning(f"[HTTPException] {_describe(request)} -> {exc.status_code}: {exc.detail}")
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = _error_body("HTTP_ERROR", str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"[Unhandled Error] {_describe(request)}: {type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    internal = InternalServerError()
    return JSONResponse(status_code=internal.status_code, content=internal.detail)
