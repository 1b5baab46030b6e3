"""Testes unitários para config/settings.py.

Valida valores padrão e métodos de validação.
"""

from __future__ import annotations

import pytest

from lazysession.config.settings import Settings, get_settings


class TestSettingsDefaults:
    """Testes para valores padrão de Settings."""

    def test_default_environment_is_development(self) -> None:
        """Ambiente padrão deve ser development."""
        s = Settings()
        assert s.environment == "development"
        assert s.is_development is True
        assert s.is_production is False

    def test_default_persistence_backend_is_memory(self) -> None:
        """Backend padrão é memory (para dev)."""
        assert Settings().session_persistence_backend == "memory"

    def test_default_cookie_attributes(self) -> None:
        """Cookie httponly/lax por padrão."""
        s = Settings()
        assert s.session_cookie_name == "SESSION"
        assert s.session_cookie_httponly is True
        assert s.session_cookie_samesite == "lax"

    def test_default_request_attribute(self) -> None:
        """Sessão fica em request.state.session por padrão."""
        assert Settings().session_request_attribute == "session"

    def test_env_vars_override_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variáveis de ambiente sobrescrevem padrões (case-insensitive)."""
        monkeypatch.setenv("SESSION_COOKIE_NAME", "sid")
        monkeypatch.setenv("SESSION_TTL_SECONDS", "60")
        s = Settings()
        assert s.session_cookie_name == "sid"
        assert s.session_ttl_seconds == 60


class TestSessionPersistenceValidation:
    """Testes para validate_session_persistence_config."""

    def test_memory_is_valid_in_development(self) -> None:
        assert Settings(environment="development").validate_session_persistence_config() == []

    @pytest.mark.parametrize("environment", ["production", "prod", "staging"])
    def test_memory_is_forbidden_outside_development(self, environment: str) -> None:
        errors = Settings(environment=environment).validate_session_persistence_config()
        assert len(errors) == 1
        assert "proibido" in errors[0]

    def test_unknown_backend_is_rejected(self) -> None:
        errors = Settings(session_persistence_backend="cassandra").validate_session_persistence_config()
        assert any("inválido" in e for e in errors)


class TestSessionCookieValidation:
    """Testes para validate_session_cookie_config."""

    def test_defaults_are_valid(self) -> None:
        assert Settings().validate_session_cookie_config() == []

    def test_invalid_samesite(self) -> None:
        errors = Settings(session_cookie_samesite="whatever").validate_session_cookie_config()
        assert any("SAMESITE" in e for e in errors)

    def test_samesite_none_requires_secure(self) -> None:
        insecure = Settings(session_cookie_samesite="none")
        secure = Settings(session_cookie_samesite="none", session_cookie_secure=True)

        assert any("SECURE" in e for e in insecure.validate_session_cookie_config())
        assert secure.validate_session_cookie_config() == []

    def test_non_positive_limits(self) -> None:
        errors = Settings(
            session_ttl_seconds=0, session_store_max_entries=0
        ).validate_session_cookie_config()
        assert len(errors) == 2


class TestLoggingValidation:
    """Testes para validate_logging_config."""

    def test_json_and_text_are_valid(self) -> None:
        assert Settings(log_format="json").validate_logging_config() == []
        assert Settings(log_format="TEXT").validate_logging_config() == []

    def test_unknown_format(self) -> None:
        assert Settings(log_format="xml").validate_logging_config()


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
