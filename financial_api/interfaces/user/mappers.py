"""
Mapping between the user wire representation and the domain entity.

Field-by-field copies only. Fields that exist on one side only
(`links`, `created_at`) are left out.
"""

from financial_api.domain.user.entities import User
from financial_api.interfaces.user.schemas import UserRepresentation


def to_entity(representation: UserRepresentation) -> User:
    return User(
        id=representation.id,
        name=representation.name,
        role=representation.role,
    )


def to_representation(user: User) -> UserRepresentation:
    return UserRepresentation(
        id=user.id,
        name=user.name,
        role=user.role,
    )
