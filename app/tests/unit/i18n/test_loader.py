"""Tests for langpick.i18n.loader module."""

import pytest

from langpick.i18n import ArrayMessageStore, YAMLMessageStore


class TestArrayMessageStore:
    """Tests for ArrayMessageStore."""

    @pytest.fixture
    def store(self):
        return ArrayMessageStore(
            {
                "en": {"some": "Some string", "another": "Another string"},
                "ru": {"some": "Одна строка", "another": "Другая строка"},
            }
        )

    def test_has(self, store):
        """has() reports the locales present."""
        assert store.has("ru")
        assert store.has("en")
        assert not store.has("de")

    def test_get(self, store):
        """get() returns a locale's messages."""
        assert store.get("ru")["some"] == "Одна строка"
        assert store.get("en")["another"] == "Another string"

    @pytest.mark.parametrize("locale", ["de", ""])
    def test_get_unknown_locale(self, store, locale):
        """get() returns an empty mapping instead of raising."""
        assert store.get(locale) == {}


class TestYAMLMessageStore:
    """Tests for YAMLMessageStore."""

    def test_store_initialization(self, temp_messages_dir):
        """YAMLMessageStore initializes with valid directory."""
        store = YAMLMessageStore(temp_messages_dir)
        assert store.messages_dir == temp_messages_dir
        assert store.use_cache is True
        assert store.cache == {}

    def test_store_initialization_nonexistent_directory(self, tmp_path):
        """YAMLMessageStore raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLMessageStore(tmp_path / "nonexistent")

    def test_has(self, yaml_store):
        """has() finds both file naming patterns."""
        assert yaml_store.has("en")
        assert yaml_store.has("ru")
        assert not yaml_store.has("de")
        assert not yaml_store.has("")

    def test_get_merges_files_in_order(self, yaml_store):
        """Files are merged in sorted order, later files override."""
        messages = yaml_store.get("en")

        assert messages["test1"] == "Test 1"
        assert messages["greeting"] == "Hi %s"
        assert messages["%d tests"] == "Test %d|Tests %d"

    def test_get_keeps_plural_lists(self, yaml_store):
        """List values are returned as pre-split plural forms."""
        assert yaml_store.get("ru")["%d tests"] == ["%d тест", "%d теста", "%d тестов"]

    def test_get_coerces_scalars(self, yaml_store):
        """Scalar values are converted to strings."""
        assert yaml_store.get("en")["answer"] == "42"

    def test_get_unknown_locale(self, yaml_store):
        """get() returns an empty mapping for a locale without files."""
        assert yaml_store.get("de") == {}

    def test_get_skips_invalid_values(self, tmp_path):
        """Nested mappings and empty lists are skipped."""
        (tmp_path / "en.yml").write_text(
            "ok: fine\nnested:\n  a: b\nempty: []\n", encoding="utf-8"
        )
        store = YAMLMessageStore(tmp_path)
        assert store.get("en") == {"ok": "fine"}

    def test_get_skips_non_mapping_documents(self, tmp_path):
        """A document that is not a mapping contributes nothing."""
        (tmp_path / "en.yml").write_text("- a\n- b\n", encoding="utf-8")
        store = YAMLMessageStore(tmp_path)
        assert store.get("en") == {}

    def test_get_empty_file(self, tmp_path):
        """An empty file yields no messages."""
        (tmp_path / "en.yml").write_text("", encoding="utf-8")
        assert YAMLMessageStore(tmp_path).get("en") == {}

    def test_get_invalid_yaml_raises(self, tmp_path):
        """Malformed YAML raises ValueError naming the file."""
        (tmp_path / "en.yml").write_text("key: [unclosed\n", encoding="utf-8")
        store = YAMLMessageStore(tmp_path)

        with pytest.raises(ValueError, match="en.yml"):
            store.get("en")

    def test_accepts_yaml_extension(self, tmp_path):
        """Files ending in .yaml are read as well."""
        (tmp_path / "messages.fr.yaml").write_text("hello: Bonjour\n", encoding="utf-8")
        store = YAMLMessageStore(tmp_path)

        assert store.has("fr")
        assert store.get("fr") == {"hello": "Bonjour"}

    def test_cache(self, temp_messages_dir):
        """Cached stores return the same mapping until the cache is cleared."""
        store = YAMLMessageStore(temp_messages_dir, use_cache=True)
        first = store.get("en")

        assert store.get("en") is first
        assert "en" in store.cache

        store.clear_cache()
        assert store.cache == {}
        assert store.get("en") is not first

    def test_no_cache(self, yaml_store):
        """Uncached stores parse the files on every call."""
        assert yaml_store.get("en") is not yaml_store.get("en")
        assert yaml_store.cache == {}

    def test_available_locales(self, yaml_store):
        """available_locales() lists every locale with a file."""
        assert yaml_store.available_locales() == ["en", "ru"]
