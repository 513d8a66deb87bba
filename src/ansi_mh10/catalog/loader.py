"""
Data Identifier Catalog

Loads the MH10.8.2 entity catalog from its JSON data file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.ansi_mh10.core.errors import CatalogError

from .descriptor import EntityDescriptor
from .patterns import PATTERNS

logger = logging.getLogger(__name__)

_CATALOG_FILE = Path(__file__).parent / "data" / "data_identifiers.json"
_catalog_cache: DataIdentifierCatalog | None = None


class EntityRecord(BaseModel):
    """One entity entry in the catalog data file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: int = Field(ge=0, description="Descriptor key")
    name: str = Field(min_length=1, description="snake_case entity name")
    title: str = Field(description="Data title")
    description: str = Field(default="", description="Free-text description")
    pattern: str = Field(description="Name of the value pattern in PATTERNS")


class CatalogFile(BaseModel):
    """Top-level layout of the catalog data file."""

    version: str = ""
    entities: list[EntityRecord]


class DataIdentifierCatalog:
    """
    Entity catalog keyed by descriptor key.

    Implements the EntityCatalog protocol.
    """

    def __init__(self, descriptors: Mapping[int, EntityDescriptor], version: str = ""):
        self._descriptors = dict(descriptors)
        self._by_name = {d.name: key for key, d in self._descriptors.items() if d.name}
        self.version = version

    @classmethod
    def from_records(
        cls,
        records: Iterable[EntityRecord],
        patterns: Mapping[str, str] = PATTERNS,
        version: str = "",
    ) -> DataIdentifierCatalog:
        """
        Build a catalog from validated records.

        Raises:
            CatalogError: If a record names an unknown pattern or a key repeats
        """
        descriptors: dict[int, EntityDescriptor] = {}
        for record in records:
            if record.key in descriptors:
                raise CatalogError(f"Duplicate descriptor key: {record.key}")
            source = patterns.get(record.pattern)
            if source is None:
                raise CatalogError(
                    f"Unknown pattern '{record.pattern}' for descriptor key {record.key}"
                )
            descriptors[record.key] = EntityDescriptor(
                title=record.title,
                description=record.description,
                pattern_source=source,
                name=record.name,
            )
        return cls(descriptors, version=version)

    def lookup(self, key: int) -> EntityDescriptor | None:
        """Get the descriptor for a key, or None if undefined."""
        return self._descriptors.get(key)

    def find_by_name(self, name: str) -> tuple[int, EntityDescriptor] | None:
        """Find a descriptor by its snake_case name (e.g., "date_yy_mm_dd")."""
        key = self._by_name.get(name.lower())
        if key is None:
            return None
        return key, self._descriptors[key]

    def keys(self) -> list[int]:
        return sorted(self._descriptors)

    def compile_all(self) -> int:
        """
        Compile every pattern up front.

        Returns:
            Number of descriptors compiled by this call
        """
        compiled = 0
        for descriptor in self._descriptors.values():
            if not descriptor.is_compiled:
                _ = descriptor.pattern
                compiled += 1
        logger.debug(f"Compiled {compiled} catalog patterns")
        return compiled

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, key: object) -> bool:
        return key in self._descriptors

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())


def read_catalog(path: Path | str) -> DataIdentifierCatalog:
    """
    Read a catalog from a JSON data file.

    Args:
        path: Path to the JSON file

    Raises:
        CatalogError: If the file cannot be read or is not a valid catalog
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e

    try:
        data = CatalogFile.model_validate_json(text)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e

    catalog = DataIdentifierCatalog.from_records(data.entities, version=data.version)
    logger.info(f"Loaded {len(catalog)} data identifiers from {path.name}")
    return catalog


def load_catalog(path: Path | str | None = None) -> DataIdentifierCatalog:
    """
    Load the entity catalog.

    The bundled catalog is read once and cached. An explicit path is read
    on every call.
    """
    global _catalog_cache

    if path is not None:
        return read_catalog(path)

    if _catalog_cache is None:
        _catalog_cache = read_catalog(_CATALOG_FILE)
    return _catalog_cache
