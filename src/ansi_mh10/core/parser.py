"""
MH10.8.2 Parser

Splits ANSI MH10.8.2 data into records and fields and resolves each field.

Data layout:
    [06<GS>] DI value <GS> DI value ... [<RS>] [06<GS>] ...

A record is optionally wrapped in a format envelope: the header "06<GS>"
and a trailing record separator. Fields within a record are separated by
GS. Each field starts with its data identifier (0..3 digits and a letter).

The callback is invoked once per field, in input order, before parse()
returns. Malformed data is reported through the callback, never raised.
"""

from __future__ import annotations

import logging
from typing import Callable

from . import errors
from .constants import FIELD_SEPARATOR, FORMAT_HEADER, RECORD_SEPARATOR, is_blank
from .identifiers import match_data_identifier
from .models import ResolvedDataIdentifier
from .resolver import DataIdentifierResolver

logger = logging.getLogger(__name__)

ResolvedCallback = Callable[[ResolvedDataIdentifier], None]

_default_parser: DataIdentifierParser | None = None


class DataIdentifierParser:
    """
    Parser for ANSI MH10.8.2 data identifier streams.

    Every loop iteration consumes at least one character, so parsing always
    terminates, including on malformed envelopes.
    """

    def __init__(self, resolver: DataIdentifierResolver | None = None):
        self._resolver = resolver if resolver is not None else DataIdentifierResolver()

    @property
    def resolver(self) -> DataIdentifierResolver:
        return self._resolver

    def parse(
        self,
        data: str | None,
        callback: ResolvedCallback,
        initial_position: int = 0,
    ) -> None:
        """
        Parse MH10.8.2 data.

        Args:
            data: The data to parse
            callback: Called with each resolved field
            initial_position: Character offset of the first character of data

        Raises:
            TypeError: If callback is not callable
        """
        if callback is None or not callable(callback):
            raise TypeError("callback must be a callable accepting a ResolvedDataIdentifier")

        if is_blank(data):
            callback(ResolvedDataIdentifier.from_error(errors.no_records(), initial_position))
            return

        self.split_records(data, callback, initial_position)

    def parse_all(
        self,
        data: str | None,
        initial_position: int = 0,
    ) -> list[ResolvedDataIdentifier]:
        """Parse data and collect the results in callback order."""
        results: list[ResolvedDataIdentifier] = []
        self.parse(data, results.append, initial_position)
        return results

    def split_records(
        self,
        data: str | None,
        callback: ResolvedCallback,
        position: int,
    ) -> None:
        """
        Split data into records, stripping any format envelope.

        A complete ISO/IEC 15434 message ("[)>"<RS> ... <RS><EOT>) is not
        recognized as a unit. The preamble reports 3003 (header missing) and
        the trailing EOT reports 3008; the records in between parse normally.

        Args:
            data: Remaining data
            callback: Called with each resolved field
            position: Character offset of the first character of data
        """
        if is_blank(data):
            callback(ResolvedDataIdentifier.from_error(errors.no_data(), position))
            return

        buffer = data
        while not is_blank(buffer):
            record_position = position
            has_trailer = RECORD_SEPARATOR in buffer
            has_header = buffer.startswith(FORMAT_HEADER)

            if has_trailer and has_header:
                record_end = buffer.index(RECORD_SEPARATOR)
                record = buffer[:record_end]
                consumed = record_end + len(RECORD_SEPARATOR)
            elif has_trailer:
                # Trailer without header: discard up to and including the trailer
                self._report_format_error("header", callback, record_position)
                record = ""
                consumed = buffer.index(RECORD_SEPARATOR) + len(RECORD_SEPARATOR)
            elif has_header:
                # Header without trailer: discard the header, parse the rest
                self._report_format_error("trailer", callback, record_position)
                record = ""
                consumed = len(FORMAT_HEADER)
            else:
                record = buffer
                consumed = len(buffer)

            buffer = buffer[consumed:]
            position += consumed

            content_position = record_position
            if record.startswith(FORMAT_HEADER):
                record = record[len(FORMAT_HEADER):]
                content_position += len(FORMAT_HEADER)

            if is_blank(record):
                continue

            self.split_fields(record, callback, content_position)

    def split_fields(
        self,
        record: str,
        callback: ResolvedCallback,
        position: int,
    ) -> None:
        """
        Split a record into fields and resolve each one.

        Args:
            record: Record content, without envelope
            callback: Called with each resolved field
            position: Character offset of the first character of record
        """
        buffer = record
        while not is_blank(buffer):
            field_position = position
            separator = buffer.find(FIELD_SEPARATOR)
            if separator < 0:
                field = buffer
                consumed = len(buffer)
            else:
                field = buffer[:separator]
                consumed = separator + len(FIELD_SEPARATOR)

            buffer = buffer[consumed:]
            position += consumed

            identifier = match_data_identifier(field)
            if identifier is None:
                logger.debug(f"No data identifier in field at position {field_position}")
                callback(
                    ResolvedDataIdentifier.from_error(
                        errors.no_data_identifier(), field_position
                    )
                )
                continue

            callback(
                self._resolver.resolve(
                    field[len(identifier):],
                    identifier,
                    field_position + len(identifier),
                )
            )

    def _report_format_error(
        self,
        missing_part: str,
        callback: ResolvedCallback,
        position: int,
    ) -> None:
        logger.warning(f"Invalid envelope at position {position}: format {missing_part} missing")
        callback(
            ResolvedDataIdentifier.from_error(
                errors.invalid_envelope_format(missing_part), position
            )
        )


def get_default_parser() -> DataIdentifierParser:
    """Get the parser built from environment configuration."""
    global _default_parser

    if _default_parser is None:
        from src.ansi_mh10.factory import create_parser

        _default_parser = create_parser()
    return _default_parser


def parse(
    data: str | None,
    callback: ResolvedCallback,
    initial_position: int = 0,
) -> None:
    """
    Parse MH10.8.2 data with the default parser.

    Args:
        data: The data to parse
        callback: Called with each resolved field
        initial_position: Character offset of the first character of data
    """
    get_default_parser().parse(data, callback, initial_position)


def parse_all(data: str | None, initial_position: int = 0) -> list[ResolvedDataIdentifier]:
    """Parse data with the default parser and collect the results."""
    return get_default_parser().parse_all(data, initial_position)
