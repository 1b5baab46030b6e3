"""Configurações centralizadas do lazysession.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única

Uso típico:
    from lazysession.config import get_settings
"""

from lazysession.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
