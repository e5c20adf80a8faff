"""
Settings handling for the Inventory Management System
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from models import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


def _get_app_dir() -> Path:
    if getattr(sys, "frozen", False):  # PyInstaller onefile
        return Path(sys.executable).parent
    return Path(__file__).parent


SETTINGS_FILE = _get_app_dir() / "settings.json"

DEFAULT_SETTINGS: dict[str, Any] = {
    "currency": DEFAULT_CURRENCY,
    "app_title": "Y.A.Z Inventory Management System",
    "seed_products": True,
    "log_level": "INFO",
}


def load_settings(path: Optional[Path] = None) -> dict[str, Any]:
    """Return the defaults overlaid with whatever the settings file holds"""
    settings_file = path or SETTINGS_FILE
    settings = dict(DEFAULT_SETTINGS)
    if not settings_file.exists():
        return settings
    try:
        stored = json.loads(settings_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_file, e)
        return settings
    if isinstance(stored, dict):
        settings.update(stored)
    else:
        logger.warning("Ignoring settings file %s: expected a JSON object", settings_file)
    return settings


def save_settings(settings: dict[str, Any], path: Optional[Path] = None) -> None:
    settings_file = path or SETTINGS_FILE
    settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
    logger.info("Settings saved to %s", settings_file)
