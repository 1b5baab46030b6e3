"""Fábrica da aplicação FastAPI."""

from __future__ import annotations

from fastapi import FastAPI

from lazysession.api.middleware import SessionMiddleware
from lazysession.api.routes import router
from lazysession.config.settings import Settings, get_settings
from lazysession.domain.protocols.session import SessionPersistenceProtocol
from lazysession.infra.session_persistence_factory import create_session_persistence
from lazysession.observability.logging import configure_logging, get_logger
from lazysession.observability.middleware import CorrelationIdMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    persistence: SessionPersistenceProtocol | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI.

    Uma `persistence` injetada dispensa a validação e a factory de backend
    (ex.: persistência compartilhada em produção).
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name, settings.log_format)

    validation_errors: list[str] = []
    validation_errors.extend(settings.validate_logging_config())
    validation_errors.extend(settings.validate_session_cookie_config())
    if persistence is None:
        validation_errors.extend(settings.validate_session_persistence_config())

    if validation_errors:
        error_msg = "; ".join(validation_errors)
        raise ValueError(f"Configuração inválida: {error_msg}")

    if persistence is None:
        persistence = create_session_persistence(settings)
    else:
        logger.info(
            "Using injected session persistence",
            extra={"persistence": type(persistence).__name__},
        )

    app = FastAPI(title=settings.service_name, version=settings.version)
    # Ordem: o último add_middleware é o mais externo (correlation_id vale para a sessão)
    app.add_middleware(
        SessionMiddleware,
        persistence=persistence,
        attribute=settings.session_request_attribute,
    )
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.correlation_id_header)
    app.include_router(router)

    app.state.settings = settings
    app.state.session_persistence = persistence

    return app


app = create_app()
