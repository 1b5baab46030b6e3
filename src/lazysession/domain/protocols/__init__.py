"""Re-exports dos Protocolos de domínio para uso por Application/Infra."""

from __future__ import annotations

from lazysession.domain.protocols.session import (
    SessionCookiePersistenceProtocol,
    SessionIdentifierAwareProtocol,
    SessionPersistenceProtocol,
    SessionProtocol,
)

__all__ = [
    "SessionProtocol",
    "SessionIdentifierAwareProtocol",
    "SessionCookiePersistenceProtocol",
    "SessionPersistenceProtocol",
]
