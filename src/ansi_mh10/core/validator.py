"""
Value Validation

Applies an entity's required-shape matcher to a field value.

Matcher faults are reported as outcome kinds instead of exceptions, so the
resolver can decide per kind how to report the field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from . import errors
from .errors import ParserError

if TYPE_CHECKING:
    from src.ansi_mh10.catalog.descriptor import EntityDescriptor


class ValidationKind(str, Enum):
    """How a matcher evaluation ended."""

    VALID = "valid"
    INVALID = "invalid"  # Matcher ran, value does not match
    MISSING_VALUE = "missing_value"  # Value could not be evaluated at all
    TIMED_OUT = "timed_out"  # Matcher exceeded its execution budget


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one value."""

    kind: ValidationKind
    errors: tuple[ParserError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.kind is ValidationKind.VALID


VALID = ValidationOutcome(ValidationKind.VALID)


def validate_value(
    descriptor: EntityDescriptor,
    value: str | None,
    timeout: float | None = None,
) -> ValidationOutcome:
    """
    Validate a value against the descriptor's pattern.

    The pattern must match the entire value.

    Args:
        descriptor: Entity descriptor holding the pattern
        value: Raw field value
        timeout: Matcher execution budget in seconds (None for no limit)

    Returns:
        ValidationOutcome; INVALID outcomes carry one pattern-mismatch error
    """
    if value is None:
        return ValidationOutcome(ValidationKind.MISSING_VALUE)

    try:
        matched = descriptor.pattern.fullmatch(value, timeout=timeout) is not None
    except TimeoutError:
        return ValidationOutcome(ValidationKind.TIMED_OUT)
    except TypeError:
        # Non-string value
        return ValidationOutcome(ValidationKind.MISSING_VALUE)

    if matched:
        return VALID

    return ValidationOutcome(
        ValidationKind.INVALID,
        errors=(errors.pattern_mismatch(value),),
    )
