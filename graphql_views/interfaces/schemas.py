"""GraphQL interface schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class InterfaceDescriptor(BaseModel):
    """A GraphQL interface known to the schema."""

    name: str = Field(
        ...,
        description="GraphQL type name, matched exactly (e.g. 'Node')",
    )
    id: Optional[str] = Field(
        default=None,
        description="Plugin id of the interface, if it differs from the name",
    )
    description: str = Field(default="")
