"""Shared utilities for the europe_vat package."""

from .logging_config import setup_logger, StructuredFormatter

__all__ = ["setup_logger", "StructuredFormatter"]
