"""Protocolos e contratos do core da aplicação."""

from .models import (
    ApiTestFailure,
    ApiTestResult,
    ConnectionCredential,
    EndpointDescriptor,
    ParamSpec,
    RawResponse,
    RequestSpec,
    ResponseEnvelope,
)
from .relay import RelayExecutorProtocol

__all__ = [
    "ApiTestFailure",
    "ApiTestResult",
    "ConnectionCredential",
    "EndpointDescriptor",
    "ParamSpec",
    "RawResponse",
    "RelayExecutorProtocol",
    "RequestSpec",
    "ResponseEnvelope",
]
