"""
Response envelope types.

Two result variants, picked at construction time:
- SuccessEnvelope -> {"code", "message"} plus "data" when a payload was supplied
- ErrorEnvelope   -> {"code", "message", "isError": true}, never "data"

And three tagged inputs accepted by the success builder (core.response.ok):
- Message        -> bare message, no payload
- Payload        -> value wrapped as "data"
- EnvelopeFields -> caller-built code/message/data, defaults filled in
"""
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class SuccessEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: StrictInt = 200
    message: str = "Success"
    data: Any = None

    @property
    def is_error(self) -> bool:
        return False

    @property
    def has_data(self) -> bool:
        """True when a payload was supplied (even an explicit None)."""
        return "data" in self.model_fields_set

    def to_dict(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: StrictInt = 400
    message: str = "Error"
    is_error: Literal[True] = Field(default=True, alias="isError")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


Envelope = Union[SuccessEnvelope, ErrorEnvelope]


# ---------------------- success inputs ---------------------- #

class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: Optional[Any] = None


class Payload(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None


class EnvelopeFields(BaseModel):
    """Envelope fields supplied directly by the caller.

    Only fields that were actually passed count; use ``model_fields_set``
    to tell an absent ``data`` from ``data=None``.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code: Optional[Any] = None
    message: Optional[Any] = None
    data: Any = None


SuccessInput = Union[Message, Payload, EnvelopeFields]
