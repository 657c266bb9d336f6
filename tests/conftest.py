"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from nsquery.common import settings as settings_module  # noqa: E402

SETTINGS_ENV_VARS = ("LOG_LEVEL", "API_BASE_URL", "API_TIMEOUT_SECONDS")


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from built-in settings, independent of the developer's shell or `.env`."""

    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
