"""Per-locale cache of messages fetched from a message store."""

from typing import Callable, Dict, Optional, Union

from langpick.core.logging import get_module_logger
from langpick.i18n.errors import MessageNotFoundError
from langpick.i18n.loader import KeyedMessageStore, MessageStore
from langpick.i18n.models import MessageMapping, MessageValue

logger = get_module_logger()

MissingObserver = Callable[[str, str], None]


class MessageCatalog:
    """Caches one message mapping per locale.

    Each locale is fetched from the store at most once. A locale the store
    does not know is cached as an empty mapping, so every key resolves as a
    miss without hitting the store again. Lookups never raise: a missing key
    returns None and is reported to the optional ``on_missing`` observer.

    Attributes:
        store: Message store or keyed message store.
        on_missing: Optional callback receiving (locale, key) on a miss.
    """

    def __init__(
        self,
        store: Union[MessageStore, KeyedMessageStore],
        on_missing: Optional[MissingObserver] = None,
    ):
        self.store = store
        self.on_missing = on_missing
        self._messages: Dict[str, Dict[str, MessageValue]] = {}

    def get(self, locale: str) -> MessageMapping:
        """Return the cached mapping for a locale, fetching it once."""
        if locale not in self._messages:
            self._messages[locale] = self._fetch(locale)
        return self._messages[locale]

    def lookup(self, locale: str, key: str) -> Optional[MessageValue]:
        """Find the message for ``key`` in ``locale``.

        Returns:
            Text or plural forms, or None if the key is not translated.
        """
        if isinstance(self.store, KeyedMessageStore):
            value = self._lookup_keyed(locale, key)
        else:
            value = self.get(locale).get(key)

        if value is None:
            logger.debug("translation_not_found", key=key, locale=locale)
            if self.on_missing is not None:
                self.on_missing(locale, key)
        return value

    def is_loaded(self, locale: str) -> bool:
        """Check whether messages for a locale are cached."""
        return locale in self._messages

    def has_messages(self, locale: str) -> bool:
        """Check whether the store offers messages for a locale."""
        if isinstance(self.store, KeyedMessageStore):
            return True
        return self.store.has(locale)

    def set_messages(self, locale: str, messages: MessageMapping) -> None:
        """Seed or replace the cached mapping for a locale."""
        self._messages[locale] = dict(messages)

    def invalidate(self, locale: Optional[str] = None) -> None:
        """Drop one locale, or every locale, from the cache."""
        if locale is None:
            self._messages.clear()
        else:
            self._messages.pop(locale, None)
        logger.info("invalidated_message_cache", locale=locale)

    def _fetch(self, locale: str) -> Dict[str, MessageValue]:
        if isinstance(self.store, KeyedMessageStore):
            return {}
        if not self.store.has(locale):
            logger.warning("messages_unavailable", locale=locale)
            return {}
        messages = dict(self.store.get(locale))
        logger.info("loaded_locale_messages", locale=locale, count=len(messages))
        return messages

    def _lookup_keyed(self, locale: str, key: str) -> Optional[MessageValue]:
        cached = self.get(locale)
        if key in cached:
            return cached[key]
        self.store.set_language(locale)
        try:
            value = self.store.get(key)
        except MessageNotFoundError:
            return None
        cached[key] = value
        return value
