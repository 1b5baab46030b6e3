"""Session: implementação padrão de sessão chave-valor.

Implementa o contrato base e as duas capacidades opcionais (identificador e
lifetime de cookie). Mantém uma cópia dos dados originais para detectar mudança.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from lazysession.domain.protocols.session import (
    SessionCookiePersistenceProtocol,
    SessionIdentifierAwareProtocol,
    SessionProtocol,
)


class Session(SessionProtocol, SessionIdentifierAwareProtocol, SessionCookiePersistenceProtocol):
    """Sessão em memória de processo, produzida por uma SessionPersistence.

    `session_id` vazio indica sessão nova (a persistência atribui o id ao salvar).
    """

    def __init__(self, data: Mapping[str, Any] | None = None, session_id: str = "") -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data or {}))
        self._original_data: dict[str, Any] = copy.deepcopy(self._data)
        self._id = session_id
        self._regenerated = False

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def set(self, key: str, value: Any) -> None:  # noqa: A003
        self._data[key] = value

    def unset(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def has_changed(self) -> bool:
        if self._regenerated:
            return True
        return self._data != self._original_data

    def regenerate(self) -> Session:
        """Retorna cópia marcada como regenerada; a instância atual não muda."""
        regenerated = copy.copy(self)
        regenerated._data = copy.deepcopy(self._data)
        regenerated._regenerated = True
        return regenerated

    def is_regenerated(self) -> bool:
        return self._regenerated

    def get_id(self) -> str:
        return self._id

    def persist_session_for(self, seconds: int) -> None:
        self.set(self.SESSION_LIFETIME_KEY, int(seconds))

    def get_session_lifetime(self) -> int:
        return int(self.get(self.SESSION_LIFETIME_KEY, 0) or 0)
