"""Utility helpers for prop_registry."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
