"""Delimiters and fixed literals of ANSI MH10.8.2 data (ISO/IEC 15434 envelope)."""

FIELD_SEPARATOR = "\x1d"  # GS, also the FNC1 function character
RECORD_SEPARATOR = "\x1e"  # RS, terminates an enveloped record
END_OF_TRANSMISSION = "\x04"  # EOT

# Format header of an MH10.8.2 record inside an ISO/IEC 15434 message
FORMAT_HEADER = "06" + FIELD_SEPARATOR

# Message envelope preamble
ISO_IEC_15434_PREAMBLE = "[)>" + RECORD_SEPARATOR

# Whitespace as understood by blank-text checks. Python's str.isspace() also
# accepts FS/GS/RS/US, which are data here.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(text: str | None) -> bool:
    """True for None, the empty string, or whitespace-only text."""
    if not text:
        return True
    return all(ch.isspace() and ch not in _SEPARATORS for ch in text)
