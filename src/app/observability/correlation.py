"""correlation_id por request, propagado para os logs.

ContextVar mantém o valor isolado por task asyncio, então invocações
concorrentes do relay não misturam ids.

Uso:
    with correlation_scope(request.headers.get("x-correlation-id")) as cid:
        ...  # logs desta task carregam `cid`
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual (string vazia fora de um request)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair.

    Args:
        correlation_id: ID recebido do chamador. Se vazio, gera um UUID v4.
    """
    value = (correlation_id or "").strip() or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
