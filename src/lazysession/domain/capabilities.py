"""Capacidades opcionais de sessão.

Cada capacidade corresponde a um contrato de domínio. A resolução é feita uma
vez por instância (ex.: na materialização do LazySession) e o resultado é
guardado junto da referência à sessão.
"""

from __future__ import annotations

from enum import StrEnum

from lazysession.domain.protocols.session import (
    SessionCookiePersistenceProtocol,
    SessionIdentifierAwareProtocol,
)


class SessionCapability(StrEnum):
    """Capacidades que uma sessão concreta pode ou não suportar."""

    IDENTIFIER = "identifier"
    """Expõe get_id()."""

    COOKIE_PERSISTENCE = "cookie_persistence"
    """Expõe persist_session_for() / get_session_lifetime()."""


_CAPABILITY_CONTRACTS: dict[SessionCapability, type] = {
    SessionCapability.IDENTIFIER: SessionIdentifierAwareProtocol,
    SessionCapability.COOKIE_PERSISTENCE: SessionCookiePersistenceProtocol,
}


def resolve_capabilities(session: object) -> frozenset[SessionCapability]:
    """Retorna o conjunto de capacidades implementadas por `session`."""

    return frozenset(
        capability
        for capability, contract in _CAPABILITY_CONTRACTS.items()
        if isinstance(session, contract)
    )


def supports(session: object, capability: SessionCapability) -> bool:
    """Verifica uma única capacidade (nunca lança)."""

    return isinstance(session, _CAPABILITY_CONTRACTS[capability])
