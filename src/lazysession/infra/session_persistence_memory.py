"""Implementação de SessionPersistence em memória (apenas dev/testes).

Guarda os dados da sessão como objetos Python num dict do processo, indexado
pelo id que viaja no cookie. Não serializa nada.
"""

from __future__ import annotations

import copy
import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field

from lazysession.application.session import Session
from lazysession.domain.capabilities import SessionCapability, supports
from lazysession.domain.protocols.session import SessionProtocol
from lazysession.infra.session_persistence_contract import (
    SessionPersistence,
    SessionPersistenceError,
)
from lazysession.observability.logging import get_logger, session_ref
from lazysession.utils.ids import new_session_id

logger: logging.Logger = get_logger(__name__)


class SessionRecord(BaseModel):
    """Registro armazenado por sessão."""

    session_id: str
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))
    expires_at: datetime

    @property
    def is_expired(self) -> bool:
        return datetime.now(tz=UTC) > self.expires_at


class InMemorySessionPersistence(SessionPersistence):
    """Persistência em memória (não usar em produção).

    - Não persiste entre restarts
    - Não funciona com múltiplas instâncias
    """

    def __init__(
        self,
        cookie_name: str = "SESSION",
        ttl_seconds: int = 7200,
        cookie_path: str = "/",
        cookie_domain: str | None = None,
        cookie_secure: bool = False,
        cookie_httponly: bool = True,
        cookie_samesite: str = "lax",
        max_entries: int = 10000,
    ) -> None:
        self._cookie_name = cookie_name
        self._ttl_seconds = ttl_seconds
        self._cookie_path = cookie_path
        self._cookie_domain = cookie_domain
        self._cookie_secure = cookie_secure
        self._cookie_httponly = cookie_httponly
        self._cookie_samesite = cookie_samesite
        self._max_entries = max_entries
        self._records: dict[str, SessionRecord] = {}

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def initialize_session_from_request(self, request: Any) -> Session:
        session_id = request.cookies.get(self._cookie_name, "")
        record = self._load(session_id) if session_id else None

        if record is None:
            logger.debug(
                "Starting new session (in-memory)",
                extra={"cookie_present": bool(session_id)},
            )
            return Session()

        logger.debug("Session loaded (in-memory)", extra={"session_id": session_ref(session_id)})
        return Session(record.data, session_id=session_id)

    def persist_session(self, session: SessionProtocol, response: Any) -> Any:
        # has_changed() não materializa um LazySession que ninguém tocou
        if not session.has_changed():
            return response

        session_id = ""
        if supports(session, SessionCapability.IDENTIFIER):
            session_id = session.get_id()  # type: ignore[attr-defined]
        lifetime = 0
        if supports(session, SessionCapability.COOKIE_PERSISTENCE):
            lifetime = session.get_session_lifetime()  # type: ignore[attr-defined]

        data = session.to_dict()
        data.pop(Session.SESSION_LIFETIME_KEY, None)

        # Só o lifetime não conta como dado: a sessão é descartada.
        if not data:
            logger.debug(
                "Session discarded (empty)",
                extra={"session_id": session_ref(session_id) if session_id else None},
            )
            if session_id:
                self._delete(session_id)
                response.delete_cookie(
                    self._cookie_name,
                    path=self._cookie_path,
                    domain=self._cookie_domain,
                    secure=self._cookie_secure,
                    httponly=self._cookie_httponly,
                    samesite=self._cookie_samesite,
                )
            return response

        if session.is_regenerated() or not session_id:
            if session_id:
                self._delete(session_id)
            session_id = new_session_id()

        self._save(session_id, session.to_dict(), lifetime or self._ttl_seconds)
        response.set_cookie(
            self._cookie_name,
            session_id,
            max_age=lifetime or None,
            path=self._cookie_path,
            domain=self._cookie_domain,
            secure=self._cookie_secure,
            httponly=self._cookie_httponly,
            samesite=self._cookie_samesite,
        )
        return response

    def _load(self, session_id: str) -> SessionRecord | None:
        record = self._records.get(session_id)
        if record is None:
            logger.debug("Session not found (in-memory)", extra={"session_id": session_ref(session_id)})
            return None

        if record.is_expired:
            del self._records[session_id]
            logger.debug("Session expired (in-memory)", extra={"session_id": session_ref(session_id)})
            return None

        return record

    def _save(self, session_id: str, data: dict[str, Any], ttl_seconds: int) -> None:
        if session_id not in self._records and len(self._records) >= self._max_entries:
            self._purge_expired()
            if len(self._records) >= self._max_entries:
                logger.error(
                    "In-memory session store is full",
                    extra={"max_entries": self._max_entries},
                )
                raise SessionPersistenceError(
                    f"In-memory session store reached max_entries={self._max_entries}"
                )

        now = datetime.now(tz=UTC)
        previous = self._records.get(session_id)
        self._records[session_id] = SessionRecord(
            session_id=session_id,
            data=copy.deepcopy(data),
            created_at=previous.created_at if previous else now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )
        logger.debug(
            "Session saved (in-memory)",
            extra={"session_id": session_ref(session_id), "ttl_seconds": ttl_seconds},
        )

    def _delete(self, session_id: str) -> bool:
        if self._records.pop(session_id, None) is None:
            return False
        logger.debug("Session deleted (in-memory)", extra={"session_id": session_ref(session_id)})
        return True

    def _purge_expired(self) -> int:
        expired = [sid for sid, record in self._records.items() if record.is_expired]
        for sid in expired:
            del self._records[sid]
        return len(expired)
