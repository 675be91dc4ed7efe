"""
Request interceptors.

Each interceptor is called with the incoming request and the app settings
before any route runs. It returns ``None`` to let the request continue, or
a response to send back immediately, in which case the rest of the chain
and the route are skipped.
"""
import logging
from typing import Callable, List, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from .config import Settings

logger = logging.getLogger(__name__)

Interceptor = Callable[[Request, Settings], Optional[Response]]


def log_request(request: Request, settings: Settings) -> Optional[Response]:
    logger.info("%s %s", request.method, request.url.path)
    return None


def require_bearer_token(request: Request, settings: Settings) -> Optional[Response]:
    if request.headers.get("authorization") != settings.expected_authorization:
        logger.warning("Rejected %s %s: missing or invalid token", request.method, request.url.path)
        return JSONResponse(status_code=403, content={"message": "Unauthorized access"})
    return None


INTERCEPTORS: List[Interceptor] = [log_request, require_bearer_token]


def run_interceptors(request: Request, settings: Settings, chain: List[Interceptor] = INTERCEPTORS) -> Optional[Response]:
    for interceptor in chain:
        response = interceptor(request, settings)
        if response is not None:
            return response
    return None
