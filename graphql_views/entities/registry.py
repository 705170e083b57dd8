"""Entity type registry - loads entity type descriptors from JSON files.

Follows the JSON-per-file pattern used by the view storage:
- One EntityTypeDescriptor per file in definitions/
- Lazy loading with _loaded guard, sorted by file name
- Global singleton via get_entity_type_registry()
"""

import json
import logging
from pathlib import Path
from typing import Optional

from graphql_views import config

from .schemas import EntityTypeDescriptor

logger = logging.getLogger(__name__)


class EntityTypeRegistry:
    """Registry of entity type descriptors loaded from JSON files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = config.ENTITY_TYPES_DIR
        self.definitions_dir = definitions_dir
        self._entity_types: dict[str, EntityTypeDescriptor] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all entity type definitions from JSON files.

        Raises:
            FileNotFoundError: If the definitions directory does not exist
            ValueError: If a definition file cannot be parsed or validated
        """
        if self._loaded:
            return

        if not self.definitions_dir.is_dir():
            raise FileNotFoundError(
                f"Entity type definitions directory not found: {self.definitions_dir}"
            )

        entity_types: dict[str, EntityTypeDescriptor] = {}
        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                entity_type = EntityTypeDescriptor.model_validate(data)
            except Exception as e:
                logger.error(f"Failed to load entity type from {json_file}: {e}")
                raise ValueError(f"Invalid entity type definition {json_file}: {e}") from e
            entity_types[entity_type.id] = entity_type
            logger.debug(f"Loaded entity type: {entity_type.id}")

        self._entity_types = entity_types
        self._loaded = True
        logger.info(f"Loaded {len(self._entity_types)} entity types")

    def get(self, entity_type_id: str) -> Optional[EntityTypeDescriptor]:
        """Get an entity type by id."""
        self.load()
        return self._entity_types.get(entity_type_id)

    def list_descriptors(self) -> list[EntityTypeDescriptor]:
        """List all entity types in load order."""
        self.load()
        return list(self._entity_types.values())

    def list_keys(self) -> list[str]:
        self.load()
        return list(self._entity_types.keys())

    def count(self) -> int:
        self.load()
        return len(self._entity_types)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._entity_types = {}
        self.load()


# Global registry instance
_registry: Optional[EntityTypeRegistry] = None


def get_entity_type_registry() -> EntityTypeRegistry:
    """Get the global entity type registry instance."""
    global _registry
    if _registry is None:
        _registry = EntityTypeRegistry()
        _registry.load()
    return _registry
