"""
Core parsing logic.

This module contains the domain logic for MH10.8.2 data identifier parsing,
independent of the catalog source, configuration and command line.
"""

from .errors import CatalogError, ErrorCode, ParserError
from .models import UNRESOLVED, Category, ResolvedDataIdentifier, category_of

__all__ = [
    "CatalogError",
    "Category",
    "ErrorCode",
    "ParserError",
    "ResolvedDataIdentifier",
    "UNRESOLVED",
    "category_of",
]
