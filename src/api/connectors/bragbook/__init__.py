"""Conector BRAGBook — adapter de borda para a API da galeria.

Este módulo é o único ponto de IO com a API BRAGBook.
Responsabilidades:
- Registry declarativo de endpoints (v1 e v2)
- Resolução de conexões (token, website property id) em `.connections`
- Relay HTTP server-side
- Taxonomia de erros do harness

`connections` não é reexportado aqui: ele depende dos payload builders,
que por sua vez importam `.errors` deste pacote.
"""

from .errors import (
    ApiTestError,
    ConnectionIndexOutOfRange,
    InvalidParameter,
    MismatchedConnections,
    MissingParameter,
    NoConfiguredConnection,
    TransportError,
    TransportErrorKind,
    UnknownEndpoint,
)
from .registry import ENDPOINT_REGISTRY, list_endpoints, lookup
from .relay import RelayConfig, RelayExecutor, create_relay_executor

__all__ = [
    "ENDPOINT_REGISTRY",
    "ApiTestError",
    "ConnectionIndexOutOfRange",
    "InvalidParameter",
    "MismatchedConnections",
    "MissingParameter",
    "NoConfiguredConnection",
    "RelayConfig",
    "RelayExecutor",
    "TransportError",
    "TransportErrorKind",
    "UnknownEndpoint",
    "create_relay_executor",
    "list_endpoints",
    "lookup",
]
