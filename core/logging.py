"""
Logging setup and request logging middleware.

- configure_logging() sets the root level/format once at app creation.
- request_logging_middleware adds X-Request-ID (UUID4) to request.state and the
  response, then logs method, path, status, latency and request-id.
"""
import logging
import time
import uuid
from typing import Callable

from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


async def request_logging_middleware(request: Request, call_next: Callable):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    try:
        response = await call_next(request)
    except Exception:
        # escaped the route: answer here so the 500 still gets a request id
        logger.exception("Unhandled exception id=%s on %s %s", request_id, request.method, request.url.path)
        response = Response(status_code=500)
    latency = (time.time() - start) * 1000.0
    response.headers["X-Request-ID"] = request_id
    logger.info(
        "[request] id=%s method=%s path=%s status=%s latency_ms=%.2f",
        request_id, request.method, request.url.path, response.status_code, latency,
    )
    return response
