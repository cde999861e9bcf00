"""Protocolos do relay usados pelo app.

Evita dependência direta da camada api (e permite spies nos testes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import RawResponse, RequestSpec


class RelayExecutorProtocol(Protocol):
    """Contrato mínimo para executar um request composto."""

    async def execute(
        self,
        spec: RequestSpec,
        timeout_ms: int | None = None,
    ) -> RawResponse: ...
