"""Entity type schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class EntityTypeDescriptor(BaseModel):
    """Identifies an entity type and the tables its records live in."""

    id: str = Field(
        ...,
        description="Entity type machine name (e.g. 'node', 'taxonomy_term')",
    )
    label: str = Field(
        default="",
        description="Human-readable name",
    )
    base_table: Optional[str] = Field(
        default=None,
        description="Base storage table, absent for non-SQL entity types",
    )
    data_table: Optional[str] = Field(
        default=None,
        description="Field data table, only set for translatable types",
    )
