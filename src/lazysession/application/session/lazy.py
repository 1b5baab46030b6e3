"""LazySession: proxy que adia a materialização da sessão real.

O middleware anexa um LazySession a todo request sem custo: a persistência só é
consultada na primeira operação que toca dados da sessão. Depois disso todas as
chamadas são delegadas à mesma sessão real, até um eventual regenerate().

Estados:
- UNMATERIALIZED: nenhuma chamada à persistência; has_changed() retorna False
- MATERIALIZED: sessão real presente; operações delegam direto
- REGENERATED: slot trocado por regenerate(); has_changed() sempre True
"""

from __future__ import annotations

import logging
from typing import Any

from lazysession.domain.capabilities import SessionCapability, resolve_capabilities
from lazysession.domain.protocols.session import (
    SessionCookiePersistenceProtocol,
    SessionIdentifierAwareProtocol,
    SessionPersistenceProtocol,
    SessionProtocol,
)
from lazysession.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class LazySession(SessionProtocol, SessionIdentifierAwareProtocol, SessionCookiePersistenceProtocol):
    """Sessão preguiçosa, substituível onde quer que uma sessão seja esperada.

    Não é thread-safe: pertence a um único request.
    """

    def __init__(self, persistence: SessionPersistenceProtocol, request: Any) -> None:
        self._persistence = persistence
        self._request = request
        self._session: SessionProtocol | None = None
        self._capabilities: frozenset[SessionCapability] = frozenset()
        self._regenerated = False

    @property
    def persistence(self) -> SessionPersistenceProtocol:
        return self._persistence

    @property
    def request(self) -> Any:
        return self._request

    # Dados -----------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self._proxied_session().get(key, default)

    def has(self, key: str) -> bool:
        return self._proxied_session().has(key)

    def set(self, key: str, value: Any) -> None:  # noqa: A003
        self._proxied_session().set(key, value)

    def unset(self, key: str) -> None:
        self._proxied_session().unset(key)

    def clear(self) -> None:
        self._proxied_session().clear()

    def to_dict(self) -> dict[str, Any]:
        return self._proxied_session().to_dict()

    # Mudança e regeneração -------------------------------------------------------
    def has_changed(self) -> bool:
        """Nunca materializa: sessão não tocada não pode ter mudado."""
        if self._session is None:
            return False
        if self._regenerated or self._session.is_regenerated():
            return True
        return self._session.has_changed()

    def is_regenerated(self) -> bool:
        return self._regenerated

    def regenerate(self) -> LazySession:
        """Troca a sessão interna pela regenerada e retorna o próprio proxy."""
        session = self._proxied_session().regenerate()
        self._attach(session)
        if session.is_regenerated():
            self._regenerated = True
        logger.debug(
            "Session regenerated (lazy)",
            extra={"regenerated": self._regenerated},
        )
        return self

    # Capacidades opcionais -------------------------------------------------------
    def get_id(self) -> str:
        session = self._proxied_session()
        if SessionCapability.IDENTIFIER not in self._capabilities:
            return ""
        return session.get_id()  # type: ignore[attr-defined]

    def persist_session_for(self, seconds: int) -> None:
        session = self._proxied_session()
        if SessionCapability.COOKIE_PERSISTENCE in self._capabilities:
            session.persist_session_for(seconds)  # type: ignore[attr-defined]

    def get_session_lifetime(self) -> int:
        session = self._proxied_session()
        if SessionCapability.COOKIE_PERSISTENCE not in self._capabilities:
            return 0
        return session.get_session_lifetime()  # type: ignore[attr-defined]

    # Internos --------------------------------------------------------------------
    def _proxied_session(self) -> SessionProtocol:
        if self._session is None:
            # Falha aqui deixa o slot vazio; a próxima chamada tenta de novo.
            self._attach(self._persistence.initialize_session_from_request(self._request))
            logger.debug(
                "Session materialized (lazy)",
                extra={"capabilities": sorted(self._capabilities)},
            )
        return self._session  # type: ignore[return-value]

    def _attach(self, session: SessionProtocol) -> None:
        self._session = session
        self._capabilities = resolve_capabilities(session)
