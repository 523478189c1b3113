"""langpick - Accept-Language negotiation, translation and pluralization.

Example:
    from langpick import ArrayMessageStore, LocaleConfiguration, TranslationService

    service = TranslationService(
        ArrayMessageStore({"en": {"greeting": "Hello %s"}}),
        LocaleConfiguration(available=("en", "ru"), accept_language="en-GB"),
    )
    service.translate("greeting", "world")
"""

from langpick.i18n import (
    ArrayMessageStore,
    FormattingError,
    LocaleConfiguration,
    MessageNotFoundError,
    TranslationError,
    TranslationService,
    YAMLMessageStore,
    create_translation_service,
)

__version__ = "1.0.0"

__all__ = [
    "ArrayMessageStore",
    "FormattingError",
    "LocaleConfiguration",
    "MessageNotFoundError",
    "TranslationError",
    "TranslationService",
    "YAMLMessageStore",
    "create_translation_service",
]
