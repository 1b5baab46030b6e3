"""Package `session`: sessão concreta e proxy preguiçoso.

Exports principais:
- Session: sessão chave-valor padrão (de session/session.py)
- LazySession: proxy que adia a materialização (de session/lazy.py)
"""

from __future__ import annotations

from lazysession.application.session.lazy import LazySession
from lazysession.application.session.session import Session

__all__ = ["Session", "LazySession"]
