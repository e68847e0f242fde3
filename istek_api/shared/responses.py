"""
Acknowledgment envelope for operations without a payload.

Deletions, activations and resets answer with ``{"success": true}``,
optionally with a ``message``. An absent message is left out of the
serialized body entirely, never sent as ``null``.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from typing_extensions import NotRequired, TypedDict


class SuccessBody(TypedDict):
    """Serialized shape of ``SuccessResponse``."""

    success: bool
    message: NotRequired[str]


class SuccessResponse(BaseModel):
    """Response for operations whose result is "it happened"."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    message: str | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_message(
        self, handler: SerializerFunctionWrapHandler
    ) -> SuccessBody:
        data = handler(self)
        if self.message is None:
            data.pop("message", None)
        return data

    @classmethod
    def ok(cls) -> "SuccessResponse":
        return cls(success=True)

    @classmethod
    def with_message(cls, message: str) -> "SuccessResponse":
        return cls(success=True, message=message)
