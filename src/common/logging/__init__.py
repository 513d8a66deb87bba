"""
Common Logging Utilities

Provides log filtering that renders control characters readably.
"""

from src.common.logging.filters import (
    ControlCharacterFilter,
    configure_logging,
    get_logger,
    render_control_characters,
)

__all__ = [
    "ControlCharacterFilter",
    "configure_logging",
    "get_logger",
    "render_control_characters",
]
