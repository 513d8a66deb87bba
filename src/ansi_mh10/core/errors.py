"""
Parser Errors

Error codes and error values reported on resolved data identifiers.

Parsing never raises for malformed input. Every problem is captured as a
ParserError and attached to the result handed to the caller's callback.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable error codes reported to callers."""

    NO_DATA = 3001
    INVALID_DATA_IDENTIFIER = 3002
    INVALID_ENVELOPE_FORMAT = 3003
    NO_RECORDS = 3004
    INVALID_VALUE = 3005
    VALUE_EVALUATION_FAILED = 3006
    VALIDATION_TIMEOUT = 3007
    NO_DATA_IDENTIFIER = 3008
    PATTERN_MISMATCH = 3100


# Message templates, keyed by error code
MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NO_DATA: "No data was provided.",
    ErrorCode.INVALID_DATA_IDENTIFIER: "Invalid data identifier {identifier}.",
    ErrorCode.INVALID_ENVELOPE_FORMAT: "Invalid data format. The format {part} is missing.",
    ErrorCode.NO_RECORDS: "No records were provided.",
    ErrorCode.INVALID_VALUE: "The value{value} is invalid for data identifier {identifier}.",
    ErrorCode.VALUE_EVALUATION_FAILED: "The value could not be evaluated for data identifier{identifier}.",
    ErrorCode.VALIDATION_TIMEOUT: "Validation timed out for data identifier{identifier}.",
    ErrorCode.NO_DATA_IDENTIFIER: "Invalid field. No data identifier was found.",
    ErrorCode.PATTERN_MISMATCH: "The value{value} does not match the required pattern.",
}

# Codes that always abort the operation that reported them
FATAL_CODES = frozenset(
    {ErrorCode.NO_DATA, ErrorCode.NO_RECORDS, ErrorCode.VALIDATION_TIMEOUT}
)


@dataclass(frozen=True)
class ParserError:
    """
    A single problem found while parsing.

    Fatal errors mean the reporting operation could not usefully continue.
    Non-fatal errors are informational; parsing carries on with the next
    field or record.
    """

    code: int
    message: str
    is_fatal: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "is_fatal": self.is_fatal,
        }

    @classmethod
    def from_code(cls, code: ErrorCode, **fields: str) -> ParserError:
        """
        Build an error from its code, formatting the code's message template.

        Args:
            code: The error code
            **fields: Values substituted into the message template

        Returns:
            ParserError with the code's fixed fatal flag
        """
        return cls(
            code=int(code),
            message=MESSAGES[code].format(**fields),
            is_fatal=code in FATAL_CODES,
        )


class CatalogError(Exception):
    """Raised when the entity catalog cannot be built."""


def _padded(text: str | None) -> str:
    """Prefix non-empty text with a space so it reads inside a sentence."""
    return f" {text}" if text else ""


def no_data() -> ParserError:
    return ParserError.from_code(ErrorCode.NO_DATA)


def no_records() -> ParserError:
    return ParserError.from_code(ErrorCode.NO_RECORDS)


def invalid_data_identifier(identifier: str | None) -> ParserError:
    return ParserError.from_code(
        ErrorCode.INVALID_DATA_IDENTIFIER,
        identifier=identifier if identifier else "<unknown>",
    )


def empty_data_identifier() -> ParserError:
    """The identifier token was present but empty."""
    return ParserError(
        code=int(ErrorCode.INVALID_DATA_IDENTIFIER),
        message="Invalid field. No data identifier was provided.",
    )


def invalid_envelope_format(part: str) -> ParserError:
    """Envelope header or trailer is missing. ``part`` names which one."""
    return ParserError.from_code(ErrorCode.INVALID_ENVELOPE_FORMAT, part=part)


def no_data_identifier() -> ParserError:
    return ParserError.from_code(ErrorCode.NO_DATA_IDENTIFIER)


def invalid_value(value: str, identifier: str) -> ParserError:
    return ParserError.from_code(
        ErrorCode.INVALID_VALUE,
        value=_padded(value),
        identifier=identifier.strip(),
    )


def value_evaluation_failed(identifier: str | None) -> ParserError:
    return ParserError.from_code(
        ErrorCode.VALUE_EVALUATION_FAILED,
        identifier=_padded(identifier),
    )


def validation_timeout(identifier: str | None) -> ParserError:
    return ParserError.from_code(
        ErrorCode.VALIDATION_TIMEOUT,
        identifier=_padded(identifier),
    )


def pattern_mismatch(value: str | None) -> ParserError:
    return ParserError.from_code(ErrorCode.PATTERN_MISMATCH, value=_padded(value))
