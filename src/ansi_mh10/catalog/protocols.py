"""
Entity Catalog Protocols

Defines the interface the resolver uses to look up entity descriptors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .descriptor import EntityDescriptor


@runtime_checkable
class EntityCatalog(Protocol):
    """
    Protocol for entity lookup by descriptor key.

    Lookups must be side-effect free.
    """

    def lookup(self, key: int) -> EntityDescriptor | None:
        """
        Look up an entity.

        Args:
            key: Descriptor key (e.g., 4000 for "D")

        Returns:
            EntityDescriptor if the key is defined, None otherwise
        """
        ...
