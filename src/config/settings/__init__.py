"""Agregador de settings do relay BRAGBook.

Re-exporta as settings de cada módulo. Organização por domínio
para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.bragbook import (
    DEFAULT_TIMEOUT_MS,
    BragBookSettings,
    get_bragbook_settings,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "BaseSettings",
    "BragBookSettings",
    "Environment",
    "get_base_settings",
    "get_bragbook_settings",
]
