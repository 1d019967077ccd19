"""
Response envelope builders.

    ok("Hello")                      -> {"code": 200, "message": "Hello"}
    ok([1, 2])                       -> {"code": 200, "message": "Success", "data": [1, 2]}
    ok({"code": 201, "data": x})     -> {"code": 201, "message": "Success", "data": x}
    ok({"name": "x"})                -> {"code": 200, "message": "Success", "data": {"name": "x"}}
    error()                          -> {"code": 400, "message": "Error", "isError": true}
    error("Conflict!", 409)          -> {"code": 409, "message": "Conflict!", "isError": true}
"""
from collections.abc import Mapping
from typing import Any, Optional

from models.envelope import (
    Envelope,
    EnvelopeFields,
    ErrorEnvelope,
    Message,
    Payload,
    SuccessEnvelope,
    SuccessInput,
)

# keys that mark a mapping as caller-built envelope fields
ENVELOPE_KEYS = ("code", "message", "data")

DEFAULT_SUCCESS_CODE = 200
DEFAULT_ERROR_CODE = 400
DEFAULT_SUCCESS_MESSAGE = "Success"
DEFAULT_ERROR_MESSAGE = "Error"

_UNSET: Any = object()


def build_envelope(code=None, message=None, error=None, data=_UNSET) -> Envelope:
    """Base constructor both ok() and error() go through.

    Falsy ``code``/``message`` count as unset. A truthy ``error`` selects the
    error variant and drops ``data``; otherwise ``data`` is kept only when
    it was passed.
    """
    is_error = bool(error)
    resolved_code = code or (DEFAULT_ERROR_CODE if is_error else DEFAULT_SUCCESS_CODE)
    resolved_message = str(message or error or DEFAULT_SUCCESS_MESSAGE)

    if is_error:
        return ErrorEnvelope(code=resolved_code, message=resolved_message)
    if data is _UNSET:
        return SuccessEnvelope(code=resolved_code, message=resolved_message)
    return SuccessEnvelope(code=resolved_code, message=resolved_message, data=data)


def classify_success_input(value: Any = _UNSET) -> SuccessInput:
    """Pick the success-input variant for a raw value.

    Mappings only contribute "code", "message" and "data"; an "error" key is
    ignored, so ok() never yields an error envelope. Sets are sent as lists.
    """
    if isinstance(value, (Message, Payload, EnvelopeFields)):
        return value
    if value is _UNSET or value is None or isinstance(value, str):
        return Message(text=None if value is _UNSET else value)
    if isinstance(value, (list, tuple)):
        return Payload(value=value)
    if isinstance(value, (set, frozenset)):
        return Payload(value=list(value))
    if isinstance(value, Mapping) and any(key in value for key in ENVELOPE_KEYS):
        return EnvelopeFields(**{key: value[key] for key in ENVELOPE_KEYS if key in value})
    return Payload(value=value)


def ok(value: Any = _UNSET) -> SuccessEnvelope:
    """Standard success envelope."""
    variant = classify_success_input(value)

    if isinstance(variant, Message):
        return build_envelope(message=variant.text)
    if isinstance(variant, Payload):
        return build_envelope(data=variant.value)

    data = variant.data if "data" in variant.model_fields_set else _UNSET
    return build_envelope(code=variant.code, message=variant.message, data=data)


def error(reason: Any = DEFAULT_ERROR_MESSAGE, code: Optional[int] = None) -> ErrorEnvelope:
    """Standard error envelope. An empty reason falls back to "Error"."""
    return build_envelope(code=code, error=reason or DEFAULT_ERROR_MESSAGE)


__all__ = ["build_envelope", "classify_success_input", "ok", "error"]
