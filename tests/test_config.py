import logging

import pytest
from pydantic import ValidationError

from tenant_router.routing_service.middleware import SubdomainRoutingMiddleware
from tenant_router.routing_service.observer import LoggingObserver
from tenant_router.shared.config import Settings, get_settings
from tenant_router.shared.logging import setup_logging


def test_defaults():
    settings = Settings()

    assert settings.root_domain == "localhost:3000"
    assert settings.log_level == "INFO"
    assert settings.debug_routing is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROOT_DOMAIN", " example.com ")
    monkeypatch.setenv("debug_routing", "true")

    settings = get_settings()

    assert settings.root_domain == "example.com"
    assert settings.debug_routing is True


def test_settings_are_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("value", ["", "   ", ":3000"])
def test_root_domain_must_name_a_host(value):
    with pytest.raises(ValidationError):
        Settings(root_domain=value)


def test_debug_flag_installs_logging_observer(monkeypatch):
    monkeypatch.setenv("DEBUG_ROUTING", "1")

    middleware = SubdomainRoutingMiddleware(app=None)

    assert isinstance(middleware._SubdomainRoutingMiddleware__observer, LoggingObserver)


def test_observer_disabled_by_default():
    middleware = SubdomainRoutingMiddleware(app=None, root_domain="example.com")

    assert middleware._SubdomainRoutingMiddleware__observer is None


def test_setup_logging_accepts_level_names():
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level

    try:
        setup_logging("debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
