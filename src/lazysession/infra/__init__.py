"""Camada de infraestrutura: implementações de persistência de sessão.

- Contrato: SessionPersistence, SessionPersistenceError
- Memória: InMemorySessionPersistence (dev/testes)
- Factory: create_session_persistence

Uso típico:
    from lazysession.infra import create_session_persistence
"""

from lazysession.infra.session_persistence_contract import (
    SessionPersistence,
    SessionPersistenceError,
)
from lazysession.infra.session_persistence_factory import create_session_persistence
from lazysession.infra.session_persistence_memory import (
    InMemorySessionPersistence,
    SessionRecord,
)

__all__ = [
    "SessionPersistence",
    "SessionPersistenceError",
    "InMemorySessionPersistence",
    "SessionRecord",
    "create_session_persistence",
]
