"""ANSI MH10.8.2 - Data identifier parsing for automatic identification data."""

__version__ = "0.1.0"
