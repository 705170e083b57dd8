#!/usr/bin/env python3
"""Print the GraphQL field definitions derived from the configured views.

Usage:
    python scripts/derive_view_fields.py
    python scripts/derive_view_fields.py --views-dir path/to/views --display-plugin graphql
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from graphql_views import config  # noqa: E402
from graphql_views.deriver import ViewFieldDeriver  # noqa: E402
from graphql_views.entities.registry import EntityTypeRegistry  # noqa: E402
from graphql_views.interfaces.registry import InterfaceRegistry  # noqa: E402
from graphql_views.views.storage import ViewStorage  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Derive GraphQL field definitions from view definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--views-dir", type=Path, help="View definitions directory")
    parser.add_argument("--entity-types-dir", type=Path, help="Entity type definitions directory")
    parser.add_argument("--interfaces-file", type=Path, help="GraphQL interfaces YAML file")
    parser.add_argument(
        "--display-plugin",
        default=config.DISPLAY_PLUGIN,
        help=f"Display plugin kind to derive fields for (default: {config.DISPLAY_PLUGIN})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    deriver = ViewFieldDeriver(
        entity_types=EntityTypeRegistry(args.entity_types_dir),
        interfaces=InterfaceRegistry(args.interfaces_file),
        views=ViewStorage(args.views_dir),
        display_plugin=args.display_plugin,
    )
    fields = deriver.derive_all(config.BASE_FIELD_DEFINITION)

    json.dump(fields, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
