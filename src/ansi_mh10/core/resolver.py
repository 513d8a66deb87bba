"""
Data Identifier Resolver

Resolves one field (identifier + value) into a ResolvedDataIdentifier:

1. Derive the descriptor key from the identifier
2. Look the key up in the entity catalog
3. Validate the value against the entity's pattern

Every step reports problems as errors on the returned result. Nothing is
raised to the caller.
"""

from __future__ import annotations

import logging

from src.ansi_mh10.catalog import EntityCatalog, load_catalog

from . import errors
from .identifiers import descriptor_key
from .models import UNRESOLVED, ResolvedDataIdentifier
from .validator import ValidationKind

logger = logging.getLogger(__name__)


class DataIdentifierResolver:
    """
    Resolves data identifiers against an entity catalog.

    Features:
    - Key derivation: reserved characters and {0..3 digits}{letter} identifiers
    - Catalog lookup: any EntityCatalog implementation
    - Validation: whole-value pattern match with an optional execution budget
    """

    def __init__(
        self,
        catalog: EntityCatalog | None = None,
        match_timeout_seconds: float | None = None,
        include_descriptors: bool = True,
    ):
        self._catalog = catalog if catalog is not None else load_catalog()
        # A non-positive budget disables the timeout
        self._timeout = (
            match_timeout_seconds
            if match_timeout_seconds is not None and match_timeout_seconds > 0
            else None
        )
        self._include_descriptors = include_descriptors

    @property
    def catalog(self) -> EntityCatalog:
        return self._catalog

    @property
    def match_timeout_seconds(self) -> float | None:
        return self._timeout

    def resolve(
        self,
        value: str,
        identifier: str | None,
        position: int,
    ) -> ResolvedDataIdentifier:
        """
        Resolve a single field.

        Args:
            value: Field value following the identifier
            identifier: Identifier token (e.g., "9N")
            position: Character offset reported on the result

        Returns:
            ResolvedDataIdentifier, always carrying the given position
        """
        key = descriptor_key(identifier)

        if key == UNRESOLVED:
            if identifier == "":
                return ResolvedDataIdentifier.from_error(
                    errors.empty_data_identifier(), position
                )

            logger.debug(f"Cannot derive a descriptor key for identifier {identifier!r}")
            return ResolvedDataIdentifier.from_error(
                errors.invalid_data_identifier(identifier), position, value
            )

        if not self._include_descriptors:
            return ResolvedDataIdentifier(
                key=key,
                identifier=identifier or "",
                value=value,
                position=position,
            )

        descriptor = self._catalog.lookup(key)
        if descriptor is None:
            logger.debug(f"No entity defined for identifier {identifier!r} (key {key})")
            return ResolvedDataIdentifier.wrap(
                errors.invalid_data_identifier(identifier),
                position,
                ResolvedDataIdentifier(
                    key=UNRESOLVED,
                    identifier=identifier or "",
                    value=value,
                    position=position,
                ),
            )

        resolved = ResolvedDataIdentifier(
            key=key,
            identifier=identifier or "",
            value=value if value is not None else "",
            position=position,
            title=descriptor.title,
            description=descriptor.description,
        )

        outcome = descriptor.validate(value, timeout=self._timeout)

        if outcome.kind is ValidationKind.VALID:
            return resolved

        if outcome.kind is ValidationKind.INVALID:
            result = ResolvedDataIdentifier.wrap(
                errors.invalid_value(value, resolved.identifier),
                position,
                resolved,
            )
            for error in outcome.errors:
                result.add_error(error)
            return result

        if outcome.kind is ValidationKind.MISSING_VALUE:
            return ResolvedDataIdentifier.wrap(
                errors.value_evaluation_failed(resolved.identifier),
                position,
                resolved,
            )

        logger.warning(
            f"Validation of identifier {resolved.identifier!r} at position {position} "
            f"exceeded {self._timeout}s"
        )
        return ResolvedDataIdentifier.wrap(
            errors.validation_timeout(resolved.identifier),
            position,
            resolved,
        )
