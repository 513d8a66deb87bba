"""
Data Identifier Keys

Derives the integer descriptor key that selects an entity in the catalog.

Ordinary identifiers are up to three digits followed by one letter. The
letter selects the category (A=1 ... Z=26) and the digits the item within it:

    D    -> 4 * 1000 + 0 = 4000
    9N   -> 14 * 1000 + 9 = 14009
    25P  -> 16 * 1000 + 25 = 16025

A handful of single characters stand alone as category 0 identifiers.
"""

from __future__ import annotations

import re

from .constants import FIELD_SEPARATOR, ISO_IEC_15434_PREAMBLE
from .models import UNRESOLVED

# Leading identifier of a field: 0..3 digits followed by a letter
DATA_IDENTIFIER_PATTERN = re.compile(r"^[0-9]{0,3}[a-zA-Z]")

RESERVED_KEYS: dict[str, int] = {
    "+": 0,  # HIBCC
    "&": 2,  # ICCBBA (ISBT 128)
    "=": 3,  # ICCBBA (ISBT 128)
    FIELD_SEPARATOR: 4,  # FNC1 used as a function character
    ISO_IEC_15434_PREAMBLE: 5,
    "-": 6,  # IFA (PZN)
    "!": 7,  # Eurocode IBLS
}

_MAX_ITEM_DIGITS = 3
_MAX_CATEGORY = 26


def descriptor_key(identifier: str | None) -> int:
    """
    Derive the descriptor key for a data identifier.

    Never raises. Anything that is not a well-formed identifier yields
    UNRESOLVED.

    Args:
        identifier: Identifier token (e.g., "9N"), or a reserved character

    Returns:
        Descriptor key, or UNRESOLVED (-1)
    """
    if identifier is None:
        return UNRESOLVED

    reserved = RESERVED_KEYS.get(identifier)
    if reserved is not None:
        return reserved

    if not identifier:
        return UNRESOLVED

    letter = identifier[-1]
    if not (letter.isascii() and letter.isalpha()):
        return UNRESOLVED

    category = ord(letter.upper()) - ord("A") + 1
    if not 1 <= category <= _MAX_CATEGORY:
        return UNRESOLVED

    item_part = identifier[:-1]
    if len(item_part) > _MAX_ITEM_DIGITS:
        return UNRESOLVED

    # str.isdigit() alone accepts non-ASCII digits
    if item_part and not (item_part.isascii() and item_part.isdigit()):
        return UNRESOLVED

    item = int(item_part) if item_part else 0
    return category * 1000 + item


def match_data_identifier(field: str) -> str | None:
    """
    Capture the leading data identifier of a field.

    Returns:
        The identifier token, or None if the field does not start with one
    """
    match = DATA_IDENTIFIER_PATTERN.match(field)
    return match.group(0) if match else None
