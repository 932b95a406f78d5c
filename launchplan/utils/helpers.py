"""
Helper utilities for Launchplan.

Provides common functions used by the CLI and the web app:
- Settings loading
- Logging setup
- Opening URLs in the default browser
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict

import toml
from loguru import logger

SETTINGS_ENV = "LAUNCHPLAN_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "cookie": {
        "name": "planTomlLz",
        "max_age_days": 400,
    },
    "share": {
        "param": "p",
    },
    "logging": {
        "level": "INFO",
    },
}


def settings_path() -> Path:
    """Settings file location: $LAUNCHPLAN_SETTINGS, else the XDG config dir."""
    custom = os.environ.get(SETTINGS_ENV, "").strip()
    if custom:
        return Path(custom).expanduser()
    return Path.home() / ".config" / "launchplan" / "settings.toml"


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    """
    Load settings from TOML file.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings file:
        [cookie]
        name = "planTomlLz"
        max_age_days = 400

        [logging]
        level = "DEBUG"
    """
    path = path or settings_path()

    if not path.exists():
        logger.debug(f"Settings file not found at {path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(path)
    except Exception as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return _deep_merge(DEFAULT_SETTINGS, {})

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def configure_logging(level: str = "INFO") -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def open_url(url: str) -> bool:
    """
    Open URL in the default browser via xdg-open.

    Returns:
        True if the opener was started
    """
    try:
        subprocess.Popen(
            ["xdg-open", url],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        logger.warning("xdg-open not found, cannot open URL")
        return False
    return True
