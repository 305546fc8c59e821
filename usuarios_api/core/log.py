"""Logging setup and the per-request access log middleware."""

import logging
import sys
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

access_logger = logging.getLogger("usuarios_api.access")


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout at the given level."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log one compact line per request: method, path, status, size and elapsed time."""
    target = request.url.path + (f"?{request.url.query}" if request.url.query else "")
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        target,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
    )
    return response
