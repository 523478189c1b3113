"""Core configuration and logging for langpick."""

from langpick.core.config import DEFAULT_SYNONYMS, TranslateSettings, settings
from langpick.core.logging import configure_logging, get_module_logger

__all__ = [
    "DEFAULT_SYNONYMS",
    "TranslateSettings",
    "settings",
    "configure_logging",
    "get_module_logger",
]
