"""Taxonomia de erros do harness de teste da API BRAGBook.

Todo erro carrega um `error_code` estável, usado pela borda HTTP
para montar o payload `{errorCode, message}` sem parsear mensagens.
"""

from __future__ import annotations

from enum import StrEnum


class TransportErrorKind(StrEnum):
    """Classificação de falhas de transporte do relay."""

    TIMEOUT = "timeout"
    CONNECTION_REFUSED = "connection_refused"
    TLS_ERROR = "tls_error"
    OTHER = "other"


class ApiTestError(Exception):
    """Base dos erros tipados do harness (sem dados sensíveis)."""

    error_code: str = "api_test_error"


class UnknownEndpoint(ApiTestError):
    """Identificador de endpoint não registrado."""

    error_code = "unknown_endpoint"

    def __init__(self, endpoint_id: str) -> None:
        super().__init__(f"Endpoint não suportado: {endpoint_id}")
        self.endpoint_id = endpoint_id


class NoConfiguredConnection(ApiTestError):
    """Nenhuma conexão configurada (API não configurada)."""

    error_code = "no_configured_connection"

    def __init__(self) -> None:
        super().__init__("Nenhuma conexão com a API configurada")


class ConnectionIndexOutOfRange(ApiTestError):
    """Índice de conexão fora dos limites da lista configurada."""

    error_code = "connection_index_out_of_range"

    def __init__(self, index: int, available: int) -> None:
        super().__init__(
            f"Índice de conexão {index} fora do intervalo (disponíveis: {available})"
        )
        self.index = index
        self.available = available


class MismatchedConnections(ApiTestError):
    """Listas de tokens e property ids com tamanhos diferentes."""

    error_code = "mismatched_connections"

    def __init__(self, token_count: int, property_id_count: int) -> None:
        super().__init__(
            f"{token_count} token(s) para {property_id_count} website property id(s)"
        )
        self.token_count = token_count
        self.property_id_count = property_id_count


class MissingParameter(ApiTestError):
    """Parâmetro obrigatório ausente."""

    error_code = "missing_parameter"

    def __init__(self, name: str) -> None:
        super().__init__(f"Parâmetro obrigatório ausente: {name}")
        self.name = name


class InvalidParameter(ApiTestError):
    """Parâmetro presente mas inválido."""

    error_code = "invalid_parameter"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Parâmetro inválido {name}: {reason}")
        self.name = name
        self.reason = reason


class TransportError(ApiTestError):
    """Falha de rede ao executar o request no relay."""

    error_code = "transport_error"

    def __init__(self, kind: TransportErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
