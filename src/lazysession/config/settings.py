"""Configurações da aplicação via variáveis de ambiente.

Todas as configurações são carregadas de env vars (ou .env em desenvolvimento).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_PERSISTENCE_BACKENDS: frozenset[str] = frozenset({"memory"})
VALID_SAMESITE_VALUES: frozenset[str] = frozenset({"lax", "strict", "none"})
VALID_LOG_FORMATS: frozenset[str] = frozenset({"json", "text"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "lazysession"
    version: str = "0.1.0"
    environment: str = "development"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text
    correlation_id_header: str = "X-Correlation-ID"

    # Sessão: persistência
    session_persistence_backend: str = "memory"  # memory (outros backends via injeção)
    session_request_attribute: str = "session"  # request.state.<attr>
    session_ttl_seconds: int = 7200  # TTL quando a sessão não define lifetime próprio
    session_store_max_entries: int = 10000  # Limite do store em memória

    # Sessão: cookie
    session_cookie_name: str = "SESSION"
    session_cookie_path: str = "/"
    session_cookie_domain: str | None = None
    session_cookie_secure: bool = False
    session_cookie_httponly: bool = True
    session_cookie_samesite: str = "lax"  # lax | strict | none

    def validate_session_persistence_config(self) -> list[str]:
        """Valida backend de persistência de sessão por ambiente.

        Em staging/prod, memory é proibido (instâncias não compartilham memória).
        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        backend = self.session_persistence_backend.lower()

        if backend not in VALID_PERSISTENCE_BACKENDS:
            errors.append(
                f"SESSION_PERSISTENCE_BACKEND '{backend}' inválido. "
                f"Valores válidos: {sorted(VALID_PERSISTENCE_BACKENDS)}"
            )

        if backend == "memory" and (self.is_staging or self.is_production):
            errors.append(
                "SESSION_PERSISTENCE_BACKEND=memory é proibido em staging/production. "
                "Injete uma SessionPersistence compartilhada em create_app()."
            )

        return errors

    def validate_session_cookie_config(self) -> list[str]:
        """Valida atributos do cookie de sessão e limites do store."""
        errors: list[str] = []
        samesite = self.session_cookie_samesite.lower()

        if samesite not in VALID_SAMESITE_VALUES:
            errors.append("SESSION_COOKIE_SAMESITE inválido: use lax | strict | none")
        if samesite == "none" and not self.session_cookie_secure:
            errors.append("SESSION_COOKIE_SAMESITE=none requer SESSION_COOKIE_SECURE=true")
        if not self.session_cookie_name:
            errors.append("SESSION_COOKIE_NAME não pode ser vazio")
        if self.session_ttl_seconds <= 0:
            errors.append("SESSION_TTL_SECONDS deve ser > 0")
        if self.session_store_max_entries <= 0:
            errors.append("SESSION_STORE_MAX_ENTRIES deve ser > 0")

        return errors

    def validate_logging_config(self) -> list[str]:
        """Valida formato de log."""
        errors: list[str] = []
        if self.log_format.lower() not in VALID_LOG_FORMATS:
            errors.append("LOG_FORMAT inválido: use json | text")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_staging(self) -> bool:
        """Retorna True se ambiente é staging."""
        return self.environment.lower() in ("staging", "stage")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que múltiplas injeções não criam novos objetos.
    """
    return Settings()
