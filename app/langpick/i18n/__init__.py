"""i18n system - locale negotiation, message lookup and pluralization.

Main components:
- models: LanguagePreference, LocaleConfiguration, MessageMapping
- resolvers: HeaderParser and LocaleResolver for Accept-Language negotiation
- plurals: plural form rules per language
- loader: MessageStore, ArrayMessageStore and YAMLMessageStore
- catalog: MessageCatalog caching messages per locale
- formatter: printf-style rendering and plural form selection
- service: TranslationService facade
- factory: create_translation_service from settings
"""

from langpick.i18n.catalog import MessageCatalog
from langpick.i18n.errors import FormattingError, MessageNotFoundError, TranslationError
from langpick.i18n.factory import config_from_settings, create_translation_service
from langpick.i18n.formatter import render, render_plural, split_choices
from langpick.i18n.loader import (
    ArrayMessageStore,
    KeyedMessageStore,
    MessageStore,
    YAMLMessageStore,
)
from langpick.i18n.models import LanguagePreference, LocaleConfiguration, MessageMapping
from langpick.i18n.plurals import plural_forms_count, plural_index
from langpick.i18n.resolvers import (
    HeaderParser,
    LocaleResolver,
    accept_language_from_headers,
)
from langpick.i18n.service import TranslationService

__all__ = [
    "ArrayMessageStore",
    "FormattingError",
    "HeaderParser",
    "KeyedMessageStore",
    "LanguagePreference",
    "LocaleConfiguration",
    "LocaleResolver",
    "MessageCatalog",
    "MessageMapping",
    "MessageNotFoundError",
    "MessageStore",
    "TranslationError",
    "TranslationService",
    "YAMLMessageStore",
    "accept_language_from_headers",
    "config_from_settings",
    "create_translation_service",
    "plural_forms_count",
    "plural_index",
    "render",
    "render_plural",
    "split_choices",
]
