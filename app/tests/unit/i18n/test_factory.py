"""Tests for langpick.i18n.factory module."""

import pytest

from langpick.core.config import TranslateSettings
from langpick.i18n import (
    TranslationService,
    YAMLMessageStore,
    config_from_settings,
    create_translation_service,
)


class TestConfigFromSettings:
    """Tests for config_from_settings()."""

    def test_maps_all_fields(self):
        """Every setting lands on the matching configuration field."""
        settings = TranslateSettings(
            TRANSLATE_LANGUAGE="ru",
            TRANSLATE_DEFAULT_LANGUAGE="de",
            TRANSLATE_ACCEPT_LANGUAGE="en-GB",
            TRANSLATE_MAX_LANGUAGES=5,
            TRANSLATE_AVAILABLE=["en", "ru"],
            TRANSLATE_SYNONYMS={"gb": "en"},
        )
        config = config_from_settings(settings)

        assert config.language == "ru"
        assert config.default_locale == "de"
        assert config.accept_language == "en-GB"
        assert config.max_preferences == 5
        assert config.available == ("en", "ru")
        assert dict(config.synonyms) == {"gb": "en"}

    def test_no_available_locales(self):
        """Unset available locales accept any language."""
        config = config_from_settings(TranslateSettings())
        assert config.available is None
        assert config.accepts_any()


class TestCreateTranslationService:
    """Tests for create_translation_service()."""

    def test_with_store(self, array_store):
        """A given store is used as-is."""
        settings = TranslateSettings(
            TRANSLATE_AVAILABLE="en,ru", TRANSLATE_ACCEPT_LANGUAGE="ru"
        )
        service = create_translation_service(settings, store=array_store)

        assert isinstance(service, TranslationService)
        assert service.get_language() == "ru"
        assert service.pluralize("%d tests", 5) == "5 тестов"

    def test_with_messages_dir(self, temp_messages_dir):
        """Without a store the YAML messages directory is used."""
        settings = TranslateSettings(
            TRANSLATE_AVAILABLE="en,ru",
            TRANSLATE_MESSAGES_DIR=str(temp_messages_dir),
        )
        service = create_translation_service(
            settings, request_headers={"Accept-Language": "ru"}
        )

        assert isinstance(service.catalog.store, YAMLMessageStore)
        assert service.translate("test1") == "Тест 1"

    def test_missing_messages_dir_raises(self, tmp_path):
        """A missing messages directory is a configuration error."""
        settings = TranslateSettings(TRANSLATE_MESSAGES_DIR=str(tmp_path / "missing"))
        with pytest.raises(ValueError):
            create_translation_service(settings)
