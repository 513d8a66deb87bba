"""
Entity Catalog

MH10.8.2 entity descriptors keyed by descriptor key, loaded from the bundled
data file.
"""

from .descriptor import EntityDescriptor
from .loader import DataIdentifierCatalog, load_catalog, read_catalog
from .patterns import PATTERNS
from .protocols import EntityCatalog

__all__ = [
    "DataIdentifierCatalog",
    "EntityCatalog",
    "EntityDescriptor",
    "PATTERNS",
    "load_catalog",
    "read_catalog",
]
