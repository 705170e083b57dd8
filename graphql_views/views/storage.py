"""View storage - loads view definitions from JSON files.

- JSON-per-file in definitions/ directory, loaded in file name order
- Lazy loading with _loaded guard
- In-memory dict keyed by view id
- Global singleton via get_view_storage()
"""

import json
import logging
from pathlib import Path
from typing import Optional

from graphql_views import config

from .schemas import ViewDefinition, ViewSummary

logger = logging.getLogger(__name__)


class ViewStorage:
    """Storage of view definitions loaded from JSON files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = config.VIEWS_DIR
        self.definitions_dir = definitions_dir
        self._views: dict[str, ViewDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all view definitions from JSON files.

        Loading is all-or-nothing: one broken file fails the whole load.

        Raises:
            FileNotFoundError: If the definitions directory does not exist
            ValueError: If a definition file cannot be parsed or validated
        """
        if self._loaded:
            return

        if not self.definitions_dir.is_dir():
            raise FileNotFoundError(
                f"Views definitions directory not found: {self.definitions_dir}"
            )

        views: dict[str, ViewDefinition] = {}
        for json_file in sorted(self.definitions_dir.glob("*.json")):
            try:
                with open(json_file, "r") as f:
                    data = json.load(f)
                view = ViewDefinition.model_validate(data)
            except Exception as e:
                logger.error(f"Failed to load view from {json_file}: {e}")
                raise ValueError(f"Invalid view definition {json_file}: {e}") from e
            if view.id in views:
                logger.warning(f"Duplicate view id '{view.id}' in {json_file}, replacing")
            views[view.id] = view
            logger.debug(f"Loaded view: {view.id}")

        self._views = views
        self._loaded = True
        logger.info(f"Loaded {len(self._views)} view definitions")

    def get(self, view_id: str) -> Optional[ViewDefinition]:
        """Get a view definition by id."""
        self.load()
        return self._views.get(view_id)

    def load_all(self) -> dict[str, ViewDefinition]:
        """All view definitions keyed by id, in load order."""
        self.load()
        return dict(self._views)

    def list_summaries(self) -> list[ViewSummary]:
        self.load()
        return [
            ViewSummary(
                id=v.id,
                label=v.label,
                base_table=v.base_table,
                displays={
                    display_id: display.display_plugin
                    for display_id, display in v.display.items()
                },
            )
            for v in self._views.values()
        ]

    def list_keys(self) -> list[str]:
        self.load()
        return list(self._views.keys())

    def count(self) -> int:
        self.load()
        return len(self._views)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._views = {}
        self.load()


# Global storage instance
_storage: Optional[ViewStorage] = None


def get_view_storage() -> ViewStorage:
    """Get the global view storage instance."""
    global _storage
    if _storage is None:
        _storage = ViewStorage()
        _storage.load()
    return _storage
