"""
Request binding and validation outcome collection.

Binding turns a raw JSON payload into a pydantic model. Instead of
raising, it reports the field-level failures as a ValidationOutcome
so handlers decide how to answer.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Leading location segments added by the framework, not part of the field path.
_REQUEST_SECTIONS = frozenset({"body", "query", "path", "header", "cookie"})


def format_error(error: Mapping[str, Any]) -> str:
    """Render one pydantic error as `"<field path> <message>"`."""
    message = str(error.get("msg", "is invalid"))
    # Undecodable bodies are located by character offset, not by field.
    if error.get("type") == "json_invalid":
        return message
    location = list(error.get("loc", ()))
    if location and location[0] in _REQUEST_SECTIONS:
        location = location[1:]
    if not location:
        return message
    field_path = ".".join(str(part) for part in location)
    return f"{field_path} {message[:1].lower()}{message[1:]}"


@dataclass(frozen=True)
class ValidationOutcome:
    """Field-level validation failures of a single request.

    Attributes:
        messages: One message per failure, in the order the validator reported them.
    """

    messages: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return bool(self.messages)

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def from_errors(cls, errors: Iterable[Mapping[str, Any]]) -> "ValidationOutcome":
        return cls(messages=tuple(format_error(error) for error in errors))

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ValidationOutcome":
        return cls.from_errors(exc.errors())


def bind(model_cls: type[ModelT], payload: Any) -> tuple[Optional[ModelT], ValidationOutcome]:
    """Validate `payload` against `model_cls`.

    Returns:
        The bound model and an empty outcome, or None and the collected failures.
    """
    try:
        return model_cls.model_validate(payload), ValidationOutcome.ok()
    except ValidationError as exc:
        return None, ValidationOutcome.from_validation_error(exc)
