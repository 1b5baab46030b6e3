"""Contrato de persistência de sessão (SessionPersistence).

Separado para manter SRP e permitir reuso entre implementações.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any

from lazysession.domain.protocols.session import SessionPersistenceProtocol, SessionProtocol
from lazysession.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class SessionPersistenceError(Exception):
    """Erro ao persistir ou recuperar sessão."""

    pass


class SessionPersistence(SessionPersistenceProtocol):
    """Contrato abstrato para criação/restauração e persistência de sessões."""

    @abstractmethod
    def initialize_session_from_request(self, request: Any) -> SessionProtocol:
        """Cria ou restaura a sessão do request.

        Args:
            request: Request HTTP de entrada (ex.: starlette.requests.Request)

        Returns:
            Sessão concreta (id vazio quando nova)

        Raises:
            SessionPersistenceError: Em caso de falha do armazenamento
        """
        ...

    @abstractmethod
    def persist_session(self, session: SessionProtocol, response: Any) -> Any:
        """Persiste a sessão e anexa o cookie ao response.

        Args:
            session: Sessão (tipicamente um LazySession)
            response: Response HTTP a ser devolvido

        Returns:
            O response, possivelmente com Set-Cookie

        Raises:
            SessionPersistenceError: Em caso de falha do armazenamento
        """
        ...
