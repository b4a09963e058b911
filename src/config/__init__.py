"""Configuration for the bridge adapter."""

from .settings import Settings

__all__ = ["Settings"]
