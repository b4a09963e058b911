"""Utility functions for the bridge adapter."""

from .logging import setup_logging, get_logger, default_logger

__all__ = ["setup_logging", "get_logger", "default_logger"]
