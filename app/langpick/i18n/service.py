"""Translation service facade.

Holds the active locale and renders messages for it.
"""

from typing import Any, Mapping, Optional, Union

from langpick.core.logging import get_module_logger
from langpick.i18n.catalog import MessageCatalog, MissingObserver
from langpick.i18n.formatter import render, render_plural
from langpick.i18n.loader import KeyedMessageStore, MessageStore
from langpick.i18n.models import LocaleConfiguration, MessageMapping, MessageValue
from langpick.i18n.resolvers import LocaleResolver

logger = get_module_logger()


class TranslationService:
    """Negotiates a language once and translates messages into it.

    The active language is resolved on construction from, in order, the
    configured language, the injected accept-language string, the request's
    Accept-Language header and the default locale. It only changes through
    set_language(), get_language(force=True) or configure().

    Usage:
        store = ArrayMessageStore({"ru": {"%d tests": "%d тест|%d теста|%d тестов"}})
        service = TranslationService(
            store,
            LocaleConfiguration(available=("en", "ru")),
            request_headers={"Accept-Language": "ru,en;q=0.8"},
        )
        service.pluralize("%d tests", 5)  # "5 тестов"

    Attributes:
        catalog: MessageCatalog caching messages per locale.
    """

    def __init__(
        self,
        store: Union[MessageStore, KeyedMessageStore],
        config: Optional[LocaleConfiguration] = None,
        request_headers: Optional[Mapping[str, str]] = None,
        on_missing: Optional[MissingObserver] = None,
    ):
        self._config = config or LocaleConfiguration()
        self._request_headers = request_headers
        self._resolver = LocaleResolver(self._config)
        self._language = ""
        self.catalog = MessageCatalog(store, on_missing=on_missing)
        self.get_language()
        self.catalog.get(self._language)

    @property
    def config(self) -> LocaleConfiguration:
        return self._config

    def configure(
        self,
        config: Optional[LocaleConfiguration] = None,
        request_headers: Optional[Mapping[str, str]] = None,
        **changes: Any,
    ) -> str:
        """Replace the configuration and negotiate the language again.

        Args:
            config: New configuration; defaults to the current one.
            request_headers: New request headers, if they changed.
            **changes: Fields to change on the configuration.

        Returns:
            The newly negotiated language.
        """
        config = config or self._config
        if changes:
            config = config.replace(**changes)
        self._config = config
        self._resolver = LocaleResolver(config)
        if request_headers is not None:
            self._request_headers = request_headers
        language = self.get_language(force=True)
        self.catalog.get(language)
        return language

    def get_language(self, force: bool = False) -> str:
        """Return the active language, negotiating it if needed.

        Args:
            force: Negotiate again even if a language is already active.
        """
        if force or not self._language:
            source = self._resolver.preference_source(self._request_headers)
            self._language = self._resolver.resolve(source)
            logger.info("negotiated_language", language=self._language, source=source)
        return self._language

    def set_language(self, language: str) -> None:
        """Select a language explicitly, bypassing negotiation."""
        self._language = language

    def has_messages(self, language: str) -> bool:
        """Check whether the store offers messages for a language."""
        return self.catalog.has_messages(language)

    def is_loaded(self, language: str) -> bool:
        """Check whether messages for a language are cached."""
        return self.catalog.is_loaded(language)

    def set_messages(self, language: str, messages: MessageMapping) -> None:
        """Seed the catalog with messages for a language."""
        self.catalog.set_messages(language, messages)

    def translate(self, key: str, *args: Any) -> str:
        """Translate a message into the active language.

        Args:
            key: Message key, returned unchanged if it has no translation.
            *args: Positional values for the message's directives.

        Returns:
            Translated and rendered message.

        Raises:
            FormattingError: If the message needs more arguments than given.
        """
        message = self._message(key)
        text = message if isinstance(message, str) else message[0]
        if args:
            return render(text, args)
        return text

    def pluralize(self, key: str, quantity: int, *args: Any) -> str:
        """Translate a message, choosing the plural form for ``quantity``.

        Each string argument is itself translated before substitution. With
        no arguments the quantity is the only argument.

        Args:
            key: Message key with "|"-separated forms or a list of forms.
            quantity: Number deciding the plural form.
            *args: Positional values for the chosen form's directives.

        Returns:
            Translated and rendered plural form.

        Raises:
            FormattingError: If the form needs more arguments than given.
        """
        message = self._message(key)
        values = args if args else (quantity,)
        translated = [
            self.translate(value) if isinstance(value, str) else value
            for value in values
        ]
        return render_plural(message, quantity, self._language, translated)

    def _message(self, key: str) -> MessageValue:
        message = self.catalog.lookup(self._language, key)
        if message is None or (not isinstance(message, str) and not message):
            return key
        return message
