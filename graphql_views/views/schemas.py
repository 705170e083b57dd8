"""View definition schemas.

A view lists records of one base table. Each display exposes the listing
through a display plugin (page, block, graphql, ...). Cache metadata on the
view is handed on to every field derived from it.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

# Cache max-age meaning "never expires"
CACHE_PERMANENT = -1


class DisplayConfig(BaseModel):
    """One display of a view."""

    display_plugin: str = Field(
        ...,
        description="Display plugin kind: 'default', 'page', 'block', 'graphql'",
    )
    display_title: str = Field(default="")
    position: int = Field(default=0)
    display_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Plugin-specific options (path, pager, arguments, ...)",
    )


class ViewDefinition(BaseModel):
    """Declarative specification of a view."""

    id: str = Field(
        ...,
        description="View machine name (e.g. 'articles')",
    )
    label: str = Field(default="")
    description: str = Field(default="")
    base_table: Optional[str] = Field(
        default=None,
        description="Table the view lists records from (e.g. 'node_field_data')",
    )
    display: dict[str, DisplayConfig] = Field(
        default_factory=dict,
        description="Displays keyed by display id, in declared order",
    )

    # Cache metadata
    cache_tags: list[str] = Field(default_factory=list)
    cache_contexts: list[str] = Field(default_factory=list)
    cache_max_age: int = Field(default=CACHE_PERMANENT)

    @property
    def config_cache_tag(self) -> str:
        return f"config:views.view.{self.id}"

    @model_validator(mode="after")
    def _ensure_config_cache_tag(self) -> "ViewDefinition":
        """A view is always invalidated when its own configuration changes."""
        if self.config_cache_tag not in self.cache_tags:
            self.cache_tags = [self.config_cache_tag, *self.cache_tags]
        return self


class ViewSummary(BaseModel):
    """Lightweight view listing."""

    id: str
    label: str
    base_table: Optional[str] = None
    displays: dict[str, str] = Field(
        default_factory=dict,
        description="Display id -> display plugin kind",
    )
