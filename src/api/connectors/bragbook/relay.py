"""Relay server-side para a API BRAGBook.

Executa o RequestSpec composto sem expor token nem host ao browser.
Uma única tentativa por invocação: retry é decisão do chamador.
Cancelamento segue o asyncio (cancelar a task aborta o request).
"""

from __future__ import annotations

import asyncio
import ssl
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from api.connectors.bragbook.errors import TransportError, TransportErrorKind
from api.connectors.bragbook.relay_logging import (
    log_relay_completed,
    log_relay_transport_error,
    log_tls_verification_disabled,
)
from app.constants.bragbook import RELAY_USER_AGENT, RELAY_VERSION
from app.protocols.models import RawResponse
from config.settings.bragbook import DEFAULT_TIMEOUT_MS

if TYPE_CHECKING:
    from app.protocols.models import RequestSpec
    from config.settings import BragBookSettings


@dataclass(frozen=True)
class RelayConfig:
    """Configuração do relay."""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    verify_tls: bool = True
    diagnostics_enabled: bool = False
    user_agent: str = RELAY_USER_AGENT
    plugin_version: str = RELAY_VERSION


class RelayExecutor:
    """Executa requests upstream com timeout, política TLS e headers padrão."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o relay.

        Args:
            config: Configuração do relay
            transport: Transporte httpx alternativo (testes, proxies)
        """
        self._config = config or RelayConfig()
        self._transport = transport

    @property
    def config(self) -> RelayConfig:
        return self._config

    async def execute(self, spec: RequestSpec, timeout_ms: int | None = None) -> RawResponse:
        """Envia o request e devolve o resultado bruto.

        Status fora de 2xx não é erro aqui: o relay só falha quando o
        transporte falha.

        Raises:
            TransportError: Timeout, conexão recusada, erro TLS ou outro.
        """
        effective_timeout_ms = timeout_ms if timeout_ms is not None else self._config.timeout_ms
        headers = self._outbound_headers(spec)
        url = httpx.URL(spec.url)

        if not self._config.verify_tls:
            log_tls_verification_disabled(spec.method.value, url.host)

        started_at = time.perf_counter()
        try:
            # Prazo total do request; o timeout do httpx vale por fase
            async with asyncio.timeout(effective_timeout_ms / 1000):
                response = await self._send(spec, url, headers, effective_timeout_ms)
        except TimeoutError as exc:
            error = _timeout_error(effective_timeout_ms)
            log_relay_transport_error(
                spec.method.value, url.host, error.kind, _elapsed_ms(started_at)
            )
            raise error from exc
        except httpx.HTTPError as exc:
            error = _classify_transport_error(exc, effective_timeout_ms)
            log_relay_transport_error(
                spec.method.value, url.host, error.kind, _elapsed_ms(started_at)
            )
            raise error from exc

        elapsed_ms = _elapsed_ms(started_at)
        if self._config.diagnostics_enabled:
            log_relay_completed(
                spec.method.value, url.host, url.path, response.status_code, elapsed_ms
            )
        return RawResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers.items()),
            elapsed_ms=elapsed_ms,
        )

    async def _send(
        self,
        spec: RequestSpec,
        url: httpx.URL,
        headers: dict[str, str],
        timeout_ms: int,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_tls,
            transport=self._transport,
            timeout=timeout_ms / 1000,
        ) as client:
            return await client.request(
                spec.method.value,
                url,
                headers=headers,
                content=spec.body_bytes(),
            )

    def _outbound_headers(self, spec: RequestSpec) -> dict[str, str]:
        """Headers do spec + padrões do relay que o spec não definiu."""
        headers = dict(spec.headers)
        defaults = {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
            "X-Plugin-Version": self._config.plugin_version,
        }
        if spec.body_json is not None:
            defaults["Content-Type"] = "application/json"
        for name, value in defaults.items():
            if not spec.has_header(name):
                headers[name] = value
        return headers


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)


def _timeout_error(timeout_ms: int) -> TransportError:
    return TransportError(
        TransportErrorKind.TIMEOUT, f"Request excedeu o timeout de {timeout_ms}ms"
    )


def _classify_transport_error(exc: httpx.HTTPError, timeout_ms: int) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        return _timeout_error(timeout_ms)
    if isinstance(exc, httpx.ConnectError):
        if _caused_by_tls(exc):
            return TransportError(TransportErrorKind.TLS_ERROR, f"Falha TLS: {exc}")
        return TransportError(
            TransportErrorKind.CONNECTION_REFUSED, f"Falha ao conectar na API: {exc}"
        )
    return TransportError(TransportErrorKind.OTHER, f"Falha de transporte: {exc}")


def _caused_by_tls(exc: BaseException) -> bool:
    current: BaseException | None = exc
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if isinstance(current, ssl.SSLError):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return "certificate verify" in str(exc).lower()


def create_relay_executor(
    settings: BragBookSettings | None = None,
) -> RelayExecutor:
    """Factory para criar o relay com a config do ambiente.

    Args:
        settings: BragBookSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_bragbook_settings

    bragbook = settings or get_bragbook_settings()
    config = RelayConfig(
        timeout_ms=bragbook.request_timeout_ms,
        verify_tls=bragbook.verify_tls,
        diagnostics_enabled=bragbook.diagnostics_enabled,
    )
    return RelayExecutor(config=config)
