"""Registry for GraphQL interfaces.

Loads interface descriptors from a YAML file and answers lookups by name.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from graphql_views import config

from .schemas import InterfaceDescriptor

logger = logging.getLogger(__name__)


class InterfaceRegistry:
    """Loads and serves GraphQL interface descriptors."""

    def __init__(self, interfaces_file: Optional[Path] = None) -> None:
        if interfaces_file is None:
            interfaces_file = config.INTERFACES_FILE
        self.interfaces_file = interfaces_file
        self._interfaces: list[InterfaceDescriptor] = []
        self._loaded = False

    def load(self) -> None:
        """Load interfaces from the YAML file.

        Raises:
            FileNotFoundError: If the interfaces file does not exist
            ValueError: If the file or one of its entries is malformed
        """
        if self._loaded:
            return

        if not self.interfaces_file.exists():
            raise FileNotFoundError(f"Interfaces file not found: {self.interfaces_file}")

        with open(self.interfaces_file) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.error(f"Failed to parse {self.interfaces_file}: {e}")
                raise ValueError(f"Invalid interfaces file {self.interfaces_file}: {e}") from e

        entries = data.get("interfaces", []) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.error(f"Expected an 'interfaces' list in {self.interfaces_file}")
            raise ValueError(
                f"Invalid interfaces file {self.interfaces_file}: expected a mapping with an 'interfaces' list"
            )

        interfaces = []
        for interface_data in entries:
            try:
                interface = InterfaceDescriptor(**interface_data)
            except Exception as e:
                logger.error(f"Failed to load interface from {self.interfaces_file}: {e}")
                raise ValueError(
                    f"Invalid interface definition in {self.interfaces_file}: {interface_data!r}: {e}"
                ) from e
            interfaces.append(interface)
            logger.debug(f"Loaded interface: {interface.name}")

        self._interfaces = interfaces
        self._loaded = True
        logger.info(f"Loaded {len(self._interfaces)} GraphQL interfaces")

    def get(self, name: str) -> Optional[InterfaceDescriptor]:
        """Get the first interface with the given name."""
        self.load()
        for interface in self._interfaces:
            if interface.name == name:
                return interface
        return None

    def list_descriptors(self) -> list[InterfaceDescriptor]:
        self.load()
        return list(self._interfaces)

    def list_names(self) -> list[str]:
        self.load()
        return [i.name for i in self._interfaces]

    def count(self) -> int:
        self.load()
        return len(self._interfaces)

    def reload(self) -> None:
        """Reload interfaces from disk."""
        self._loaded = False
        self._interfaces = []
        self.load()


# Global registry instance
_registry: Optional[InterfaceRegistry] = None


def get_interface_registry() -> InterfaceRegistry:
    """Get the global interface registry instance."""
    global _registry
    if _registry is None:
        _registry = InterfaceRegistry()
        _registry.load()
    return _registry
