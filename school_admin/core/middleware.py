"""
HTTP middleware: request context and access logging.

`RequestContextMiddleware` assigns the request id (reusing one forwarded by a
proxy) and picks up the `schoolId` query parameter so every log line written
while serving the request is tagged with both. `AccessLogMiddleware` times the
request and writes one access line, at warning level for 4xx/5xx responses.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from school_admin.core.constants import (
    HEADER_PROCESS_TIME,
    HEADER_REQUEST_ID,
    SCHOOL_QUERY_PARAM,
)
from school_admin.core.logging import get_logger, request_id as request_id_var, school_id as school_id_var

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(HEADER_REQUEST_ID) or uuid.uuid4().hex
        request.state.request_id = rid

        rid_token = request_id_var.set(rid)
        school_token = school_id_var.set(request.query_params.get(SCHOOL_QUERY_PARAM))
        try:
            response = await call_next(request)
        finally:
            school_id_var.reset(school_token)
            request_id_var.reset(rid_token)

        response.headers[HEADER_REQUEST_ID] = rid
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        response.headers[HEADER_PROCESS_TIME] = f"{elapsed:.4f}"

        access_log = logger.bind(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(elapsed * 1000, 2),
            client_host=request.client.host if request.client else None,
        )
        line = f"{request.method} {request.url.path} -> {response.status_code}"
        if response.status_code >= 400:
            access_log.warning(line)
        else:
            access_log.info(line)
        return response


def register_middlewares(app: FastAPI) -> None:
    # Added last runs first: the request context must wrap the access log
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestContextMiddleware)


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
