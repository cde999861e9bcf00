"""Casos de uso do harness de teste da API BRAGBook."""

from .run_endpoint_test import ApiTestPhase, RunEndpointTestUseCase

__all__ = [
    "ApiTestPhase",
    "RunEndpointTestUseCase",
]
