"""Geradores de identificadores."""

from __future__ import annotations

import uuid


def new_session_id() -> str:
    """Gera um session_id único (hex, sem hífens, seguro para cookie)."""

    return uuid.uuid4().hex
