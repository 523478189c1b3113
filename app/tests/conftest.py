import os

import pytest


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Keep TranslateSettings from reading the developer's environment.

    Removes TRANSLATE_* variables and runs each test from an empty directory
    so no stray .env file is picked up.
    """
    for name in list(os.environ):
        if name.startswith("TRANSLATE_") or name in ("LOG_LEVEL", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
