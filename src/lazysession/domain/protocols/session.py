"""Protocolos de domínio para sessão HTTP e sua persistência.

O contrato base (SessionProtocol) cobre leitura/escrita chave-valor, detecção de
mudança e regeneração. Capacidades opcionais ficam em contratos separados:
uma sessão concreta pode implementar nenhuma, uma ou ambas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SessionProtocol(ABC):
    """Contrato mínimo de uma sessão chave-valor."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any: ...

    @abstractmethod
    def has(self, key: str) -> bool: ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:  # noqa: A003
        ...

    @abstractmethod
    def unset(self, key: str) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Snapshot de todos os pares chave/valor (ordem irrelevante)."""
        ...

    @abstractmethod
    def has_changed(self) -> bool: ...

    @abstractmethod
    def regenerate(self) -> SessionProtocol:
        """Retorna uma sessão com nova identidade (dados preservados)."""
        ...

    @abstractmethod
    def is_regenerated(self) -> bool: ...


class SessionIdentifierAwareProtocol(ABC):
    """Capacidade: a sessão expõe um identificador estável."""

    @abstractmethod
    def get_id(self) -> str:
        """Identificador da sessão; string vazia se ainda não atribuído."""
        ...


class SessionCookiePersistenceProtocol(ABC):
    """Capacidade: a sessão registra o max-age desejado para o cookie."""

    # Chave reservada onde implementações podem guardar o lifetime nos dados
    SESSION_LIFETIME_KEY = "__SESSION_TTL__"

    @abstractmethod
    def persist_session_for(self, seconds: int) -> None: ...

    @abstractmethod
    def get_session_lifetime(self) -> int:
        """Lifetime em segundos; 0 significa cookie de sessão do navegador."""
        ...


class SessionPersistenceProtocol(ABC):
    """Contrato do colaborador que cria/restaura e persiste sessões."""

    @abstractmethod
    def initialize_session_from_request(self, request: Any) -> SessionProtocol:
        """Produz a sessão real para o request (nova ou restaurada).

        Pode fazer I/O. Erros propagam para quem disparou a materialização.
        """
        ...

    @abstractmethod
    def persist_session(self, session: SessionProtocol, response: Any) -> Any:
        """Persiste a sessão e retorna o response (com cookie, se aplicável)."""
        ...
