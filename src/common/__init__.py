"""Shared utilities used across packages."""
