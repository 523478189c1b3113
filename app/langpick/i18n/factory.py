"""Factory functions for creating i18n components from settings."""

from pathlib import Path
from typing import Mapping, Optional, Union

from langpick.core.config import TranslateSettings, settings as default_settings
from langpick.core.logging import get_module_logger
from langpick.i18n.loader import KeyedMessageStore, MessageStore, YAMLMessageStore
from langpick.i18n.models import LocaleConfiguration
from langpick.i18n.service import TranslationService

logger = get_module_logger()


def config_from_settings(settings: TranslateSettings) -> LocaleConfiguration:
    """Build a LocaleConfiguration from TranslateSettings."""
    return LocaleConfiguration(
        language=settings.language,
        default_locale=settings.default_language,
        accept_language=settings.accept_language,
        available=tuple(settings.available) if settings.available else None,
        synonyms=settings.synonyms,
        max_preferences=settings.max_languages,
    )


def create_translation_service(
    settings: Optional[TranslateSettings] = None,
    store: Optional[Union[MessageStore, KeyedMessageStore]] = None,
    request_headers: Optional[Mapping[str, str]] = None,
) -> TranslationService:
    """Create a TranslationService configured from settings.

    Args:
        settings: Settings to use (default: module-level settings).
        store: Message store; defaults to a YAMLMessageStore reading
            settings.messages_dir.
        request_headers: Headers of the current request, if any.

    Returns:
        TranslationService with its language negotiated.

    Raises:
        ValueError: If no store is given and messages_dir does not exist.

    Usage:
        # From environment variables
        service = create_translation_service()

        # Per request
        service = create_translation_service(request_headers=request.headers)
    """
    settings = settings or default_settings
    if store is None:
        store = YAMLMessageStore(Path(settings.messages_dir))

    service = TranslationService(
        store,
        config_from_settings(settings),
        request_headers=request_headers,
    )
    logger.info(
        "translation_service_created",
        language=service.get_language(),
        available=settings.available,
    )
    return service
