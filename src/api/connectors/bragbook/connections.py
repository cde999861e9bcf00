"""Resolução de conexões (token, website property id) configuradas.

Uma instalação pode ter várias contas upstream. Tokens e property ids
chegam como listas paralelas; o pareamento é estritamente posicional.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.bragbook.errors import (
    ConnectionIndexOutOfRange,
    InvalidParameter,
    MismatchedConnections,
    NoConfiguredConnection,
)
from api.payload_builders.bragbook.params import parse_strict_int
from app.protocols.models import ConnectionCredential

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_connections(
    tokens: Sequence[str],
    property_ids: Sequence[str | int],
) -> tuple[ConnectionCredential, ...]:
    """Pareia tokens e property ids por posição.

    Args:
        tokens: Tokens na ordem configurada
        property_ids: Website property ids na mesma ordem

    Returns:
        Tupla ordenada de conexões (índice 0 = padrão). Vazia se nada
        configurado.

    Raises:
        MismatchedConnections: Se as listas têm tamanhos diferentes.
        InvalidParameter: Se um token é vazio ou um property id não é inteiro.
    """
    if len(tokens) != len(property_ids):
        logger.warning(
            "connections_mismatched",
            extra={"token_count": len(tokens), "property_id_count": len(property_ids)},
        )
        raise MismatchedConnections(len(tokens), len(property_ids))

    connections: list[ConnectionCredential] = []
    for position, (token, raw_property_id) in enumerate(zip(tokens, property_ids, strict=True)):
        token = token.strip() if isinstance(token, str) else ""
        if not token:
            raise InvalidParameter(f"tokens[{position}]", "must not be empty")
        property_id = parse_strict_int(f"websitePropertyIds[{position}]", raw_property_id)
        if property_id <= 0:
            raise InvalidParameter(f"websitePropertyIds[{position}]", "must be positive")
        connections.append(ConnectionCredential(token=token, website_property_id=property_id))
    return tuple(connections)


def resolve(
    connections: Sequence[ConnectionCredential],
    index: int = 0,
) -> ConnectionCredential:
    """Seleciona a conexão pelo índice.

    Raises:
        NoConfiguredConnection: Lista vazia (API não configurada).
        ConnectionIndexOutOfRange: Índice negativo ou >= tamanho da lista.
    """
    if not connections:
        raise NoConfiguredConnection()
    if index < 0 or index >= len(connections):
        raise ConnectionIndexOutOfRange(index, len(connections))
    return connections[index]
