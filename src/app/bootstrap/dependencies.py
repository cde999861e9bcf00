"""Factories do harness: criação de implementações concretas.

Centraliza a criação do relay e do use case a partir das settings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.bragbook import create_relay_executor
from api.connectors.bragbook.connections import build_connections
from app.use_cases.api_test import RunEndpointTestUseCase
from config.settings import get_bragbook_settings

if TYPE_CHECKING:
    from api.connectors.bragbook import RelayExecutor
    from app.protocols.models import ConnectionCredential
    from config.settings import BragBookSettings


@lru_cache(maxsize=1)
def get_relay_executor() -> RelayExecutor:
    """Relay singleton (não guarda estado entre invocações)."""
    return create_relay_executor(get_bragbook_settings())


def load_connections(
    settings: BragBookSettings | None = None,
) -> tuple[ConnectionCredential, ...]:
    """Conexões configuradas, pareadas por posição.

    Raises:
        MismatchedConnections: Listas de tamanhos diferentes.
        InvalidParameter: Token vazio ou property id não inteiro.
    """
    bragbook = settings or get_bragbook_settings()
    return build_connections(bragbook.api_tokens, bragbook.website_property_ids)


def create_api_test_use_case(
    settings: BragBookSettings | None = None,
) -> RunEndpointTestUseCase:
    """Monta o use case com relay e conexões do ambiente.

    Settings vêm do cache de get_bragbook_settings; as conexões são
    reconstruídas a partir delas a cada chamada. Mudanças de ambiente só
    valem após limpar o cache.
    """
    bragbook = settings or get_bragbook_settings()
    return RunEndpointTestUseCase(
        executor=get_relay_executor(),
        connections=load_connections(bragbook),
        base_url=bragbook.api_base_url,
        timeout_ms=bragbook.request_timeout_ms,
    )
