"""Utilities - logging."""

from scoreline.utilities.logging import setup_logging

__all__ = ["setup_logging"]
