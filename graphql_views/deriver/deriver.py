"""Derive GraphQL field definitions from configured views.

Every view whose base table belongs to a known entity type contributes one
field per display of the GraphQL display plugin. The field returns the
entity type's GraphQL interface when one exists, otherwise the generic
'Entity' interface.
"""

import logging
import threading
from typing import Any, Optional, Protocol

from graphql_views import config
from graphql_views.casing import camelcase
from graphql_views.entities.registry import get_entity_type_registry
from graphql_views.entities.schemas import EntityTypeDescriptor
from graphql_views.interfaces.registry import get_interface_registry
from graphql_views.interfaces.schemas import InterfaceDescriptor
from graphql_views.views.schemas import ViewDefinition
from graphql_views.views.storage import get_view_storage

from .schemas import DerivedFieldDefinition

logger = logging.getLogger(__name__)


class EntityTypeSource(Protocol):
    def list_descriptors(self) -> list[EntityTypeDescriptor]: ...


class InterfaceSource(Protocol):
    def list_descriptors(self) -> list[InterfaceDescriptor]: ...


class ViewSource(Protocol):
    def load_all(self) -> dict[str, ViewDefinition]: ...


class ViewFieldDeriver:
    """Builds field definitions for all GraphQL displays of all views.

    Collaborator errors are not caught; a failed derivation can simply be
    re-run.
    """

    def __init__(
        self,
        entity_types: EntityTypeSource,
        interfaces: InterfaceSource,
        views: ViewSource,
        display_plugin: Optional[str] = None,
        fallback_type: Optional[str] = None,
    ):
        self.entity_types = entity_types
        self.interfaces = interfaces
        self.views = views
        self.display_plugin = display_plugin or config.DISPLAY_PLUGIN
        self.fallback_type = fallback_type or config.FALLBACK_TYPE
        # Table name -> entity type id, built on first lookup
        self._tables: Optional[dict[str, str]] = None
        self._tables_lock = threading.Lock()
        # Derived keys per field id from the latest pass, without the base template
        self._fields: dict[str, DerivedFieldDefinition] = {}

    def _build_table_index(self) -> dict[str, str]:
        tables: dict[str, str] = {}
        for entity_type in self.entity_types.list_descriptors():
            if entity_type.data_table:
                tables[entity_type.data_table] = entity_type.id
            # Base table second: it wins when both name the same table
            if entity_type.base_table:
                tables[entity_type.base_table] = entity_type.id
        logger.debug(f"Indexed {len(tables)} entity tables")
        return tables

    def resolve_entity_type_for_table(self, table: Optional[str]) -> Optional[str]:
        """Get the id of the entity type a base or data table belongs to.

        Args:
            table: Base or data table name, as referenced by a view

        Returns:
            Entity type id, or None if no entity type owns the table
        """
        if self._tables is None:
            with self._tables_lock:
                if self._tables is None:
                    self._tables = self._build_table_index()
        if not table:
            return None
        return self._tables.get(table) or None

    def interface_exists(self, name: str) -> bool:
        """Check if a GraphQL interface with exactly this name exists."""
        return any(
            interface.name == name for interface in self.interfaces.list_descriptors()
        )

    def derive_all(self, base_definition: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Derive one field definition per GraphQL display.

        Args:
            base_definition: Plugin definition template; every derived
                definition is a copy of it with the derived keys set on top

        Returns:
            Derived definitions keyed by '<view id>-<display id>'
        """
        derivatives: dict[str, dict[str, Any]] = {}
        fields: dict[str, DerivedFieldDefinition] = {}
        names: dict[str, str] = {}

        for view_id, view in self.views.load_all().items():
            entity_type = self.resolve_entity_type_for_table(view.base_table)
            if not entity_type:
                logger.debug(
                    f"Skipping view {view_id}: no entity type for table {view.base_table!r}"
                )
                continue

            type_name = camelcase(entity_type)
            field_type = type_name if self.interface_exists(type_name) else self.fallback_type

            for display_id, display in view.display.items():
                if display.display_plugin != self.display_plugin:
                    continue

                field = DerivedFieldDefinition(
                    id=f"{view_id}-{display_id}",
                    name=camelcase([view_id, display_id]) + config.NAME_SUFFIX,
                    type=field_type,
                    view=view_id,
                    display=display_id,
                    cache_tags=list(view.cache_tags),
                    cache_contexts=list(view.cache_contexts),
                    cache_max_age=view.cache_max_age,
                )

                if field.name in names and names[field.name] != field.id:
                    logger.warning(
                        f"Field name {field.name} of {field.id} is already used by {names[field.name]}"
                    )
                names[field.name] = field.id

                fields[field.id] = field
                derivatives[field.id] = {**base_definition, **field.model_dump()}

        self._fields = fields
        logger.info(f"Derived {len(derivatives)} view fields")
        return derivatives

    def derive_one(
        self, derivative_id: str, base_definition: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Get a single derived definition, deriving all of them if needed."""
        if derivative_id not in self._fields:
            self.derive_all(base_definition)
        field = self._fields.get(derivative_id)
        if field is None:
            return None
        return {**base_definition, **field.model_dump()}


# Global deriver instance
_deriver: Optional[ViewFieldDeriver] = None


def get_view_field_deriver() -> ViewFieldDeriver:
    """Get the global deriver, wired to the global registries."""
    global _deriver
    if _deriver is None:
        _deriver = ViewFieldDeriver(
            entity_types=get_entity_type_registry(),
            interfaces=get_interface_registry(),
            views=get_view_storage(),
        )
    return _deriver


def reset_view_field_deriver() -> None:
    """Drop the global deriver; the next access builds a fresh table index."""
    global _deriver
    _deriver = None
