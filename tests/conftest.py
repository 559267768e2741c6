import pytest

from tenant_router.shared.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's environment and the settings cache."""
    for name in ("ROOT_DOMAIN", "LOG_LEVEL", "DEBUG_ROUTING"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
