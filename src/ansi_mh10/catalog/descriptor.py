"""
Entity Descriptor

A catalog entry: title, description and the required shape of its value.
"""

from __future__ import annotations

import regex

from src.ansi_mh10.core.validator import ValidationOutcome, validate_value


class EntityDescriptor:
    """
    Describes one MH10.8.2 entity.

    The pattern is compiled on first use and cached. Concurrent first use
    may compile twice; every compilation is equivalent, so the cache
    converges without locking.
    """

    def __init__(
        self,
        title: str,
        description: str,
        pattern_source: str,
        name: str = "",
    ):
        self.title = title
        self.description = description
        self.pattern_source = pattern_source
        self.name = name
        self._compiled: regex.Pattern | None = None

    @property
    def pattern(self) -> regex.Pattern:
        """Compiled pattern for the entity's values."""
        compiled = self._compiled
        if compiled is None:
            compiled = regex.compile(self.pattern_source)
            self._compiled = compiled
        return compiled

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    def validate(self, value: str | None, timeout: float | None = None) -> ValidationOutcome:
        """Validate a value against this entity's pattern."""
        return validate_value(self, value, timeout=timeout)

    def __repr__(self) -> str:
        return f"EntityDescriptor(title={self.title!r}, pattern={self.pattern_source!r})"
