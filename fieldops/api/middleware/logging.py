"""
Request/Response logging middleware.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response

from fieldops.config.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware:
    """Request/Response logging middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        """Add request/response logging middleware."""

        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            # Reuse the caller's request ID when one is sent
            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            request.state.request_id = request_id

            start_time = time.time()
            log = logger.bind(
                request_id=request_id, method=request.method, path=request.url.path
            )
            log.info(
                "Request started",
                client_host=request.client.host if request.client else None,
            )

            try:
                with structlog.contextvars.bound_contextvars(request_id=request_id):
                    response = await call_next(request)
            except Exception as e:
                log.error(
                    "Request failed",
                    error=str(e),
                    process_time=f"{time.time() - start_time:.4f}s",
                )
                raise

            process_time = time.time() - start_time
            log.info(
                "Request completed",
                status_code=response.status_code,
                process_time=f"{process_time:.4f}s",
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"
            return response
