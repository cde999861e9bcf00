"""Helpers de logging do relay BRAGBook (sem tokens, sem query string)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import TransportErrorKind

logger = logging.getLogger(__name__)


def log_tls_verification_disabled(method: str, host: str) -> None:
    """Desvio explícito: TLS desligado nunca passa em silêncio."""
    logger.warning(
        "relay_tls_verification_disabled",
        extra={"method": method, "target_host": host},
    )


def log_relay_completed(
    method: str,
    host: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    """Diagnóstico verboso de um request concluído."""
    logger.info(
        "relay_request_completed",
        extra={
            "method": method,
            "target_host": host,
            "path": path,
            "status_code": status_code,
            "elapsed_ms": elapsed_ms,
        },
    )


def log_relay_transport_error(
    method: str,
    host: str,
    kind: TransportErrorKind,
    elapsed_ms: float,
) -> None:
    """Loga falha de transporte sem expor dados sensíveis."""
    logger.warning(
        "relay_transport_error",
        extra={
            "method": method,
            "target_host": host,
            "transport_kind": kind.value,
            "elapsed_ms": elapsed_ms,
        },
    )
