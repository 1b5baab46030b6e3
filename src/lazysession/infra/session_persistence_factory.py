"""Factory de SessionPersistence a partir de Settings."""

from __future__ import annotations

from lazysession.config.settings import Settings
from lazysession.infra.session_persistence_contract import SessionPersistence
from lazysession.infra.session_persistence_memory import InMemorySessionPersistence
from lazysession.observability.logging import get_logger

logger = get_logger(__name__)


def create_session_persistence(settings: Settings) -> SessionPersistence:
    """Cria a persistência configurada em SESSION_PERSISTENCE_BACKEND.

    Raises:
        ValueError: backend desconhecido
    """
    backend = settings.session_persistence_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory session persistence", extra={"backend": backend})
        return InMemorySessionPersistence(
            cookie_name=settings.session_cookie_name,
            ttl_seconds=settings.session_ttl_seconds,
            cookie_path=settings.session_cookie_path,
            cookie_domain=settings.session_cookie_domain,
            cookie_secure=settings.session_cookie_secure,
            cookie_httponly=settings.session_cookie_httponly,
            cookie_samesite=settings.session_cookie_samesite.lower(),
            max_entries=settings.session_store_max_entries,
        )

    raise ValueError(f"Unsupported session persistence backend: {backend}")
