"""
Control Character Filtering

Provides a logging filter that makes separator characters visible in logs.

MH10.8.2 data carries non-printable separators (GS, RS, EOT). Written to a
terminal or log file as-is they vanish or corrupt the output, so log
messages render them as readable placeholders instead.
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import Any

# Named placeholders for the separators used by MH10.8.2 and ISO/IEC 15434
CONTROL_CHARACTER_NAMES: dict[str, str] = {
    "\x04": "<EOT>",
    "\x1c": "<FS>",
    "\x1d": "<GS>",
    "\x1e": "<RS>",
    "\x1f": "<US>",
}

# C0 controls and DEL, except tab, line feed and carriage return
CONTROL_CHARACTERS: Pattern[str] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _placeholder(match: re.Match[str]) -> str:
    char = match.group(0)
    return CONTROL_CHARACTER_NAMES.get(char, f"<0x{ord(char):02X}>")


def render_control_characters(text: str) -> str:
    """
    Replace control characters with readable placeholders.

    Args:
        text: The text to render

    Returns:
        Text with GS, RS, EOT, FS and US shown as <GS>, <RS>, <EOT>, <FS>,
        <US>, and any other control character as <0xNN>
    """
    return CONTROL_CHARACTERS.sub(_placeholder, text)


class ControlCharacterFilter(logging.Filter):
    """
    A logging filter that renders control characters in log messages.

    Usage:
        logger = logging.getLogger(__name__)
        logger.addFilter(ControlCharacterFilter())
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Render control characters in the log record.

        Returns:
            True (always allows the record, but rewrites it)
        """
        if isinstance(record.msg, str):
            record.msg = render_control_characters(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._render_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._render_value(arg) for arg in record.args)

        return True

    def _render_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return render_control_characters(value)
        return value


def _has_filter(filterer: logging.Filterer) -> bool:
    return any(isinstance(f, ControlCharacterFilter) for f in filterer.filters)


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
) -> None:
    """
    Configure the root logger with control character rendering enabled.

    Safe to call more than once; the filter is attached only where it is
    not already present.

    Args:
        level: Logging level
        format_string: Log format string (uses default if not specified)
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    control_filter = ControlCharacterFilter()
    if not _has_filter(root_logger):
        root_logger.addFilter(control_filter)

    # Records from child loggers bypass the root logger's filters
    for handler in root_logger.handlers:
        if not _has_filter(handler):
            handler.addFilter(control_filter)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the control character filter attached.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger with ControlCharacterFilter attached
    """
    logger = logging.getLogger(name)

    if not _has_filter(logger):
        logger.addFilter(ControlCharacterFilter())

    return logger
