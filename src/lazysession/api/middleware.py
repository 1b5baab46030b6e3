"""Middleware que anexa um LazySession a cada request."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from lazysession.application.session import LazySession
from lazysession.domain.protocols.session import SessionPersistenceProtocol
from lazysession.observability.logging import get_logger
from lazysession.observability.timing import timed

logger = get_logger(__name__)

SESSION_ATTRIBUTE = "session"


class SessionMiddleware(BaseHTTPMiddleware):
    """Cria um LazySession por request e persiste-o ao final.

    A sessão real só é carregada se algum handler tocar nos dados; requests que
    não usam sessão não pagam custo de armazenamento.
    """

    def __init__(
        self,
        app: ASGIApp,
        persistence: SessionPersistenceProtocol,
        attribute: str = SESSION_ATTRIBUTE,
    ) -> None:
        super().__init__(app)
        self._persistence = persistence
        self._attribute = attribute

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        session = LazySession(self._persistence, request)
        setattr(request.state, self._attribute, session)

        response = await call_next(request)

        try:
            with timed("session_persist"):
                return self._persistence.persist_session(session, response)
        except Exception as e:
            logger.error(
                "Failed to persist session",
                extra={"path": request.url.path, "error": type(e).__name__},
            )
            raise
