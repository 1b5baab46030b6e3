"""Testes mínimos de compatibilidade entre implementações e protocolos de domínio."""

from lazysession.application.session import LazySession, Session
from lazysession.domain.protocols import (
    SessionCookiePersistenceProtocol,
    SessionIdentifierAwareProtocol,
    SessionPersistenceProtocol,
    SessionProtocol,
)
from lazysession.infra import InMemorySessionPersistence, SessionPersistence


def test_session_persistence_implements_protocol() -> None:
    assert issubclass(SessionPersistence, SessionPersistenceProtocol)
    assert issubclass(InMemorySessionPersistence, SessionPersistence)


def test_session_implements_all_contracts() -> None:
    for contract in (
        SessionProtocol,
        SessionIdentifierAwareProtocol,
        SessionCookiePersistenceProtocol,
    ):
        assert issubclass(Session, contract)


def test_lazy_session_is_a_drop_in_session() -> None:
    for contract in (
        SessionProtocol,
        SessionIdentifierAwareProtocol,
        SessionCookiePersistenceProtocol,
    ):
        assert issubclass(LazySession, contract)
