"""
Parser Factory

Creates a parser wired to the configured catalog and validation budget.
"""

from __future__ import annotations

import logging

from src.ansi_mh10.catalog import load_catalog
from src.ansi_mh10.config import ParserConfig, load_config
from src.ansi_mh10.core.parser import DataIdentifierParser
from src.ansi_mh10.core.resolver import DataIdentifierResolver

logger = logging.getLogger(__name__)


def create_resolver(config: ParserConfig | None = None) -> DataIdentifierResolver:
    """
    Create a data identifier resolver based on configuration.

    Args:
        config: Parser configuration (loaded from environment if omitted)

    Returns:
        DataIdentifierResolver instance
    """
    if config is None:
        config = load_config()

    if config.catalog_path is not None:
        logger.info(f"Using catalog file: {config.catalog_path}")

    return DataIdentifierResolver(
        catalog=load_catalog(config.catalog_path),
        match_timeout_seconds=config.match_timeout_seconds,
        include_descriptors=config.include_descriptors,
    )


def create_parser(config: ParserConfig | None = None) -> DataIdentifierParser:
    """
    Create a data identifier parser based on configuration.

    Args:
        config: Parser configuration (loaded from environment if omitted)

    Returns:
        DataIdentifierParser instance
    """
    return DataIdentifierParser(resolver=create_resolver(config))
