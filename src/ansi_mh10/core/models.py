"""
Resolved Data Identifier Models

Data classes for the per-field results handed to the parse callback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .errors import ParserError

# Key of an identifier that could not be resolved
UNRESOLVED = -1

# Implied decimal point position. MH10.8.2 values never carry one.
NO_INVERSE_EXPONENT = -1


class Category(IntEnum):
    """MH10.8.2 data identifier categories (the trailing letter, A=1)."""

    SPECIAL_CHARACTERS = 0
    RESERVED_1 = 1
    CONTAINER_INFORMATION = 2
    FIELD_CONTINUATION = 3
    DATE = 4
    ENVIRONMENTAL_FACTORS = 5
    LOOPING = 6
    RESERVED_7 = 7
    HUMAN_RESOURCES = 8
    RESERVED_9 = 9
    LICENSE_PLATE = 10
    TRANSACTION_REFERENCE = 11
    LOCATION_REFERENCE = 12
    MAINTENANCE_CODES = 13
    INDUSTRY_ASSIGNED_CODES = 14
    RESERVED_15 = 15
    ITEM_INFORMATION = 16
    MEASUREMENT = 17
    MISCELLANEOUS = 18
    TRACEABILITY_NUMBER_FOR_AN_ENTITY = 19
    TRACEABILITY_NUMBER_FOR_GROUPS_OF_ENTITIES = 20
    UPU_MH10_SC8_WG2_AGREED_UPON_CODES = 21
    PARTY_TO_THE_TRANSACTION = 22
    ACTIVITY_REFERENCE = 23
    RESERVED_24 = 24
    INTERNAL_APPLICATIONS = 25
    MUTUALLY_DEFINED = 26


def category_of(key: int) -> Category | None:
    """
    Get the category of a descriptor key.

    Keys below 1000 are the single-character identifiers of category 0.

    Returns:
        Category, or None for the unresolved key
    """
    if key <= UNRESOLVED:
        return None
    return Category(key // 1000)


@dataclass(frozen=True)
class ResolvedDataIdentifier:
    """
    A data identifier and value, resolved against the entity catalog.

    Fields are fixed at construction. Only the error list grows, through
    add_error(), while a processing step is still assembling the result.
    """

    key: int  # Descriptor key (e.g., 4000 for "D"), -1 if unresolved
    identifier: str  # Identifier as it appeared in the data (e.g., "9N")
    value: str  # Raw value following the identifier
    position: int  # Character offset within the original input
    title: str = ""
    description: str = ""
    inverse_exponent: int = NO_INVERSE_EXPONENT
    # Left out of the hash so results stay hashable; still compared for equality
    errors: list[ParserError] = field(default_factory=list, hash=False)

    @classmethod
    def from_error(
        cls,
        error: ParserError,
        position: int,
        value: str | None = None,
    ) -> ResolvedDataIdentifier:
        """
        Create an unresolved result carrying a single error.

        Args:
            error: The error to report
            position: Character offset at which the error occurred
            value: Optional raw value, kept for diagnostics
        """
        return cls(
            key=UNRESOLVED,
            identifier="",
            value=value or "",
            position=position,
            errors=[error],
        )

    @classmethod
    def wrap(
        cls,
        error: ParserError,
        position: int,
        inner: ResolvedDataIdentifier | None,
    ) -> ResolvedDataIdentifier:
        """
        Create a result that keeps everything already known about a field
        and appends a further error.

        Errors on the inner result are copied forward ahead of the new one.
        """
        if inner is None:
            return cls.from_error(error, position)

        return cls(
            key=inner.key,
            identifier=inner.identifier,
            value=inner.value,
            position=position,
            title=inner.title,
            description=inner.description,
            inverse_exponent=inner.inverse_exponent,
            errors=[*inner.errors, error],
        )

    def add_error(self, error: ParserError | None) -> None:
        """Append an error. None is ignored."""
        if error is not None:
            self.errors.append(error)

    @property
    def is_error(self) -> bool:
        """True if resolution produced at least one error."""
        return len(self.errors) > 0

    @property
    def is_fatal(self) -> bool:
        """True if any carried error is fatal."""
        return any(error.is_fatal for error in self.errors)

    @property
    def category(self) -> Category | None:
        return category_of(self.key)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "key": self.key,
            "identifier": self.identifier,
            "value": self.value,
            "position": self.position,
            "title": self.title,
            "description": self.description,
            "inverse_exponent": self.inverse_exponent,
            "errors": [error.to_dict() for error in self.errors],
            "is_fatal": self.is_fatal,
        }
