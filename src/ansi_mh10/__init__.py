"""
ANSI MH10.8.2 Data Identifier Parser

Parses ANSI MH10.8.2 data (optionally in an ISO/IEC 15434 envelope) into
resolved data identifiers, reporting malformed input as errors on the
results rather than raising.

Usage:
    from src.ansi_mh10 import parse_all

    for result in parse_all("D050203\\x1d9N123"):
        print(result.identifier, result.title, result.errors)
"""

from src import __version__
from src.ansi_mh10.core.errors import CatalogError, ErrorCode, ParserError
from src.ansi_mh10.core.identifiers import descriptor_key
from src.ansi_mh10.core.models import (
    UNRESOLVED,
    Category,
    ResolvedDataIdentifier,
    category_of,
)
from src.ansi_mh10.core.parser import DataIdentifierParser, parse, parse_all
from src.ansi_mh10.core.resolver import DataIdentifierResolver
from src.ansi_mh10.factory import create_parser, create_resolver

__all__ = [
    "__version__",
    "CatalogError",
    "Category",
    "DataIdentifierParser",
    "DataIdentifierResolver",
    "ErrorCode",
    "ParserError",
    "ResolvedDataIdentifier",
    "UNRESOLVED",
    "category_of",
    "create_parser",
    "create_resolver",
    "descriptor_key",
    "parse",
    "parse_all",
]
