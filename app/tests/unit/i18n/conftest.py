"""Feature-level fixtures for i18n system tests.

Provides message stores and header samples for negotiation and translation
scenarios.
"""

import pytest
import yaml

from langpick.i18n import ArrayMessageStore, LocaleConfiguration, YAMLMessageStore


@pytest.fixture
def sample_messages():
    """English and Russian messages, with both plural encodings."""
    return {
        "en": {
            "test1": "Test 1",
            "test %s": "test string %s",
            "%d tests": "Test %d|Tests %d",
            "%d %s found": "Found %d %s|Found %d %s",
            "error": "problem",
            "apples": ["%d apple", "%d apples"],
        },
        "ru": {
            "test1": "Тест 1",
            "test %s": "тестовая строка %s",
            "%d tests": ["%d тест", "%d теста", "%d тестов"],
            "%d %s found": "Найдена %d %s|Найдено %d %s|Найдено %d %s",
            "error": "ошибка",
        },
    }


@pytest.fixture
def array_store(sample_messages):
    """ArrayMessageStore with the sample messages."""
    return ArrayMessageStore(sample_messages)


@pytest.fixture
def default_config():
    """Configuration offering English and Russian."""
    return LocaleConfiguration(default_locale="en", available=("en", "ru"))


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create temporary directory with sample YAML message files.

    Returns a directory structure like:
    - en.yml
    - extra.en.yml
    - messages.ru.yml
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"test1": "Test 1", "greeting": "Hello %s"}, f)

    with open(tmp_path / "extra.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"greeting": "Hi %s", "%d tests": "Test %d|Tests %d", "answer": 42},
            f,
        )

    with open(tmp_path / "messages.ru.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"test1": "Тест 1", "%d tests": ["%d тест", "%d теста", "%d тестов"]},
            f,
            allow_unicode=True,
        )

    return tmp_path


@pytest.fixture
def yaml_store(temp_messages_dir):
    """YAMLMessageStore for the temporary messages directory."""
    return YAMLMessageStore(temp_messages_dir, use_cache=False)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple": "ru",
        "with_quality": "ru,en-US;q=0.8,en;q=0.6",
        "mixed_separators": "ja-Kata;q=0.1,en_PCN;q=1,zh_HKG;q=0.9,tlh-Latn-US",
        "malformed_quality": "en_PCN;djfiasjdflsakdjflksajflas,ru;q=0.1",
        "unsupported": "de-DE,fr;q=0.9",
    }
