"""
Domain entities for the user bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(Enum):
    """Access role granted to a user of the financial API."""

    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_USER = "ROLE_USER"


@dataclass(frozen=True)
class User:
    """A user of the financial API.

    The identifier and creation timestamp are assigned by the store
    on persist; both are None before that.
    """

    name: str
    role: Role = Role.ROLE_USER
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
