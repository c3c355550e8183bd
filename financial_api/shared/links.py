"""
Hypermedia links.

Links are built from a base URL and a resource identifier only,
so they do not depend on the routing framework.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

SELF_REL = "self"


class Link(BaseModel):
    """A hypermedia reference attached to a representation."""

    model_config = ConfigDict(frozen=True)

    rel: str = Field(..., description="Relation of the target to the current resource")
    href: str = Field(..., description="Absolute URL of the target resource")


def build_self_href(base_url: str, resource_id: Union[int, str]) -> str:
    """Return the URL identifying `resource_id` inside the `base_url` collection."""
    return f"{base_url.rstrip('/')}/{resource_id}"


def self_link(base_url: str, resource_id: Union[int, str]) -> Link:
    return Link(rel=SELF_REL, href=build_self_href(base_url, resource_id))
