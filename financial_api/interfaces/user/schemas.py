"""
Pydantic schemas for user API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from financial_api.domain.user.entities import Role
from financial_api.shared.links import Link
from financial_api.shared.responses import ResponseEnvelope

NAME_MIN_LEN = 3
NAME_MAX_LEN = 100


class UserRepresentation(BaseModel):
    """Wire representation of a user.

    Used both as the create request body and as the response payload.
    The identifier and links are filled in by the server; values sent
    by clients for them are not trusted.

    Attributes:
        id: Identifier generated by the store.
        name: Unique user name (3-100 chars, not blank).
        role: Access role, ROLE_USER unless stated otherwise.
        links: Hypermedia links, including a `self` link once persisted.
    """

    id: Optional[int] = Field(default=None, description="Identifier generated by the store")
    name: str = Field(
        default=None,
        validate_default=True,
        description=f"Unique user name ({NAME_MIN_LEN}-{NAME_MAX_LEN} characters)",
    )
    role: Role = Field(default=Role.ROLE_USER, description="Access role of the user")
    links: list[Link] = Field(default_factory=list, description="Hypermedia links")

    @field_validator("name", mode="before")
    @classmethod
    def _reject_blank_name(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("blank", "must not be blank")
        return value

    @field_validator("name")
    @classmethod
    def _check_name_length(cls, value: str) -> str:
        value = value.strip()
        if not NAME_MIN_LEN <= len(value) <= NAME_MAX_LEN:
            raise PydanticCustomError(
                "name_length",
                "must be between {min_length} and {max_length} characters",
                {"min_length": NAME_MIN_LEN, "max_length": NAME_MAX_LEN},
            )
        return value


UserEnvelope = ResponseEnvelope[UserRepresentation]
