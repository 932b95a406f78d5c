# Launchplan Utilities Package
"""
Shared utility functions and helpers for Launchplan.
"""

from .helpers import configure_logging, load_settings, open_url

__all__ = ["configure_logging", "load_settings", "open_url"]
