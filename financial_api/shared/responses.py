"""
Uniform response envelope.

Every API response body is either a success carrying exactly one
payload or a failure carrying a non-empty, ordered list of messages.
The two cases are separate immutable types, so a half-built envelope
cannot exist.

Wire format:
    success: {"data": {...}, "errors": []}
    failure: {"errors": ["...", ...]}
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[PayloadT]):
    """Envelope for a successful operation."""

    payload: PayloadT

    def to_body(self) -> dict[str, Any]:
        return {"data": self.payload.model_dump(mode="json"), "errors": []}


@dataclass(frozen=True)
class Failure:
    """Envelope for a rejected operation.

    Attributes:
        messages: Human-readable error messages, in the order they were reported.
    """

    messages: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError("A failure envelope needs at least one error message")

    @classmethod
    def from_messages(cls, *messages: str) -> "Failure":
        return cls(messages=tuple(messages))

    def to_body(self) -> dict[str, Any]:
        return {"errors": list(self.messages)}


Envelope = Union[Success[Any], Failure]


def envelope_response(
    envelope: Envelope,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Render an envelope as a JSON HTTP response."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.to_body(),
        headers=dict(headers) if headers else None,
    )


class ResponseEnvelope(BaseModel, Generic[PayloadT]):
    """OpenAPI schema of the envelope. Used for documentation only."""

    data: Optional[PayloadT] = Field(default=None, description="Operation payload on success")
    errors: list[str] = Field(default_factory=list, description="Error messages on failure")


class ErrorEnvelope(BaseModel):
    """OpenAPI schema of a failure envelope."""

    errors: list[str] = Field(..., min_length=1)
