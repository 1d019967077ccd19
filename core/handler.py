"""
Request handler adapter.

Every endpoint goes through handle():
- error envelope      -> status=code, plain-text body=message
- success, send=json  -> full envelope as JSON
- success, send=raw   -> generic send: payload envelopes as JSON, bare messages as text
- accessor raised     -> bare 500, empty body (logged server-side only)
"""
import logging
from typing import Awaitable, Callable, Literal

from fastapi.responses import JSONResponse, PlainTextResponse, Response

from models.envelope import Envelope, SuccessEnvelope

logger = logging.getLogger(__name__)

SendMode = Literal["json", "raw"]


def send_raw(envelope: SuccessEnvelope) -> Response:
    if envelope.has_data:
        return JSONResponse(envelope.to_dict())
    return PlainTextResponse(envelope.message)


async def handle(accessor: Callable[[], Awaitable[Envelope]], *, send: SendMode = "json") -> Response:
    try:
        result = await accessor()

        if result.is_error:
            return PlainTextResponse(result.message, status_code=result.code)

        if send == "raw":
            return send_raw(result)
        return JSONResponse(result.to_dict())
    except Exception:
        logger.exception("Unhandled error in accessor %s", getattr(accessor, "__qualname__", accessor))
        return Response(status_code=500)
