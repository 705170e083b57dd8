"""Derived field definition schema."""

from pydantic import BaseModel, Field


class DerivedFieldDefinition(BaseModel):
    """Fields the deriver sets on every derived definition.

    The emitted record is this model dumped over a copy of the base
    definition, so these keys always take precedence.
    """

    id: str = Field(..., description="'<view id>-<display id>'")
    name: str = Field(..., description="GraphQL field name, e.g. 'ArticlesGraphql1View'")
    type: str = Field(..., description="GraphQL interface the field returns")
    view: str
    display: str
    cache_tags: list[str] = Field(default_factory=list)
    cache_contexts: list[str] = Field(default_factory=list)
    cache_max_age: int
