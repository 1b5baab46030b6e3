"""Dependências injetadas nas rotas."""

from __future__ import annotations

from fastapi import Request

from lazysession.config.settings import Settings
from lazysession.domain.protocols.session import SessionPersistenceProtocol, SessionProtocol


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_session_persistence(request: Request) -> SessionPersistenceProtocol:
    """Retorna a persistência de sessão ativa."""

    return request.app.state.session_persistence


def get_session(request: Request) -> SessionProtocol:
    """Retorna o LazySession do request (não materializa)."""

    attribute = request.app.state.settings.session_request_attribute
    session = getattr(request.state, attribute, None)
    if session is None:
        raise RuntimeError("SessionMiddleware não instalado: request sem sessão")
    return session
