"""Runtime configuration, read from the environment once at import."""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent

ENTITY_TYPES_DIR = Path(
    os.environ.get(
        "GRAPHQL_VIEWS_ENTITY_TYPES_DIR",
        str(PACKAGE_DIR / "entities" / "definitions"),
    )
)
INTERFACES_FILE = Path(
    os.environ.get(
        "GRAPHQL_VIEWS_INTERFACES_FILE",
        str(PACKAGE_DIR / "interfaces" / "definitions" / "interfaces.yaml"),
    )
)
VIEWS_DIR = Path(
    os.environ.get(
        "GRAPHQL_VIEWS_VIEWS_DIR",
        str(PACKAGE_DIR / "views" / "definitions"),
    )
)

# Display plugin kind that exposes a view to GraphQL
DISPLAY_PLUGIN = os.environ.get("GRAPHQL_VIEWS_DISPLAY_PLUGIN", "graphql")

LOG_LEVEL = os.environ.get("GRAPHQL_VIEWS_LOG_LEVEL", "INFO").upper()

# Type used when the entity type has no GraphQL interface of its own
FALLBACK_TYPE = "Entity"

NAME_SUFFIX = "View"

# Field plugin template every derived definition is merged over
BASE_FIELD_DEFINITION = {
    "provider": "graphql_views",
    "parents": ["Root"],
    "secure": True,
    "multi": True,
}
