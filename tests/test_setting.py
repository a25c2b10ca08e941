"""
Tests for settings, exceptions and the Azure Functions entry point.
"""

import azure.functions as func

from smmsg.core.exceptions import InvalidURLError, SmmsgException
from smmsg.core.setting import EnvSettingsOptions, Settings

SETTING_NAMES = [
    "ENV_SETTING",
    "LOG_LEVEL",
    "DOMAIN_ALLOWLIST_ENABLED",
    "ALLOWED_DOMAINS",
    "MAX_URL_LENGTH",
    "MAX_LOGGED_URL_LENGTH",
]


class TestSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        """Test that the allow-list ships disabled."""
        for name in SETTING_NAMES:
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)
        assert config.ENV_SETTING is EnvSettingsOptions.development
        assert config.LOG_LEVEL == "INFO"
        assert config.DOMAIN_ALLOWLIST_ENABLED is False
        assert config.ALLOWED_DOMAINS == ["localhost", "fiasse.org"]
        assert config.MAX_URL_LENGTH == 2048
        assert config.MAX_LOGGED_URL_LENGTH == 200

    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("ENV_SETTING", "production")
        monkeypatch.setenv("domain_allowlist_enabled", "true")
        monkeypatch.setenv("ALLOWED_DOMAINS", '["example.com", "example.org"]')
        monkeypatch.setenv("MAX_LOGGED_URL_LENGTH", "120")

        config = Settings(_env_file=None)
        assert config.ENV_SETTING is EnvSettingsOptions.production
        assert config.DOMAIN_ALLOWLIST_ENABLED is True
        assert config.ALLOWED_DOMAINS == ["example.com", "example.org"]
        assert config.MAX_LOGGED_URL_LENGTH == 120


class TestExceptions:
    """Test the exception hierarchy."""

    def test_invalid_url_error(self):
        """Test that only the reason is carried."""
        error = InvalidURLError("Malformed URL")
        assert isinstance(error, SmmsgException)
        assert error.reason == "Malformed URL"
        assert error.status_code == 400
        assert str(error) == "Malformed URL"


def test_function_app_entry_point():
    """Test that the Functions host finds an ASGI function app."""
    from function_app import app

    assert isinstance(app, func.AsgiFunctionApp)

    (function,) = app.get_functions()
    assert function.get_function_name() == "smmsg"
