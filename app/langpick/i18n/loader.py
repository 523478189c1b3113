"""Message store interface and implementations.

A message store hands the catalog one locale's messages at a time. Stores
never raise for an unknown locale: ``has()`` reports False and ``get()``
returns an empty mapping.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from langpick.core.logging import get_module_logger
from langpick.i18n.models import MessageMapping, MessageValue

logger = get_module_logger()


class MessageStore(ABC):
    """Abstract base for message stores."""

    @abstractmethod
    def has(self, locale: str) -> bool:
        """Determine whether messages exist for a locale.

        Args:
            locale: Locale code.

        Returns:
            True if the store holds messages for the locale.
        """
        pass

    @abstractmethod
    def get(self, locale: str) -> MessageMapping:
        """Fetch all messages of a locale.

        Args:
            locale: Locale code.

        Returns:
            Mapping of key to text or plural forms; empty if unknown.
        """
        pass


class KeyedMessageStore(ABC):
    """Stricter store variant serving one key at a time.

    The store holds a current language and raises MessageNotFoundError for
    keys it cannot translate.
    """

    @abstractmethod
    def set_language(self, locale: str) -> None:
        """Switch the language subsequent ``get()`` calls answer for."""
        pass

    @abstractmethod
    def get(self, key: str) -> MessageValue:
        """Return the message for ``key`` in the current language.

        Raises:
            MessageNotFoundError: If the key has no translation.
        """
        pass


class ArrayMessageStore(MessageStore):
    """In-memory store backed by a nested dictionary.

    Example:
        store = ArrayMessageStore({
            "en": {"some": "Some string", "another": "Another string"},
            "ru": {"some": "Одна строка", "another": "Другая строка"},
        })
    """

    def __init__(self, messages: Mapping[str, MessageMapping]):
        self.messages: Dict[str, MessageMapping] = dict(messages)

    def has(self, locale: str) -> bool:
        return locale in self.messages

    def get(self, locale: str) -> MessageMapping:
        if not locale:
            return {}
        return self.messages.get(locale) or {}


class YAMLMessageStore(MessageStore):
    """Store reading flat YAML message files from a directory.

    A locale's messages come from ``<locale>.yml`` and any
    ``<domain>.<locale>.yml`` files (``.yaml`` also accepted), merged in
    sorted filename order so later files override earlier ones.

    File format::

        "%d tests": "%d test|%d tests"
        greeting: Hello %s
        apples:
          - "%d apple"
          - "%d apples"

    Attributes:
        messages_dir: Directory containing YAML files.
        use_cache: Whether parsed locales are kept in memory.
        cache: Parsed messages by locale.
    """

    def __init__(self, messages_dir: Path, use_cache: bool = True):
        self.messages_dir = Path(messages_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, MessageValue]] = {}

        if not self.messages_dir.is_dir():
            raise ValueError(f"Messages directory not found: {self.messages_dir}")

        logger.info(
            "initialized_yaml_store",
            messages_dir=str(self.messages_dir),
            use_cache=use_cache,
        )

    def has(self, locale: str) -> bool:
        return bool(locale) and bool(self._files_for(locale))

    def get(self, locale: str) -> MessageMapping:
        """Load and merge a locale's YAML files.

        Raises:
            ValueError: If a file for the locale is not valid YAML.
        """
        if not locale:
            return {}
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        files = self._files_for(locale)
        messages: Dict[str, MessageValue] = {}
        for yaml_file in files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(messages, data, yaml_file)

        logger.info(
            "loaded_messages",
            locale=locale,
            file_count=len(files),
            message_count=len(messages),
        )

        if self.use_cache:
            self.cache[locale] = messages
        return messages

    def available_locales(self) -> List[str]:
        """List locales that have at least one message file."""
        locales = set()
        for path in self.messages_dir.iterdir():
            if path.is_file() and path.suffix in (".yml", ".yaml"):
                locales.add(path.stem.split(".")[-1])
        return sorted(locales)

    def clear_cache(self) -> None:
        """Clear all cached messages."""
        self.cache.clear()
        logger.info("cleared_message_cache")

    def _files_for(self, locale: str) -> List[Path]:
        files = []
        for suffix in ("yml", "yaml"):
            files.extend(self.messages_dir.glob(f"{locale}.{suffix}"))
            files.extend(self.messages_dir.glob(f"*.{locale}.{suffix}"))
        return sorted(set(path for path in files if path.is_file()))

    def _merge_yaml_data(
        self,
        messages: Dict[str, MessageValue],
        data: Any,
        source_file: Path,
    ) -> None:
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for key, value in data.items():
            normalized = _normalize_value(value)
            if normalized is None:
                logger.warning(
                    "invalid_message_value",
                    file=str(source_file),
                    key=str(key),
                    expected="string or list of strings",
                )
                continue
            messages[str(key)] = normalized


def _normalize_value(value: Any) -> Optional[MessageValue]:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, list) and value:
        if all(isinstance(item, (str, int, float)) for item in value):
            return [str(item) for item in value]
    return None
