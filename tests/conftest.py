"""Configuração do pytest para o relay BRAGBook."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.protocols.models import ConnectionCredential, RawResponse, RequestSpec  # noqa: E402


class SpyRelayExecutor:
    """Relay fake que registra cada RequestSpec recebido."""

    def __init__(
        self,
        response: RawResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self._response = response or RawResponse(
            status=200, body='{"success": true}', headers={}, elapsed_ms=5.0
        )
        self._error = error
        self.calls: list[tuple[RequestSpec, int | None]] = []

    async def execute(self, spec: RequestSpec, timeout_ms: int | None = None) -> RawResponse:
        self.calls.append((spec, timeout_ms))
        if self._error is not None:
            raise self._error
        return self._response


@pytest.fixture
def spy_executor() -> SpyRelayExecutor:
    return SpyRelayExecutor()


@pytest.fixture
def connections() -> tuple[ConnectionCredential, ...]:
    return (
        ConnectionCredential(token="abc123", website_property_id=42),
        ConnectionCredential(token="def456", website_property_id=99),
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Settings e relay são cacheados; cada teste lê o próprio ambiente."""
    from app.bootstrap.dependencies import get_relay_executor
    from config.settings import get_base_settings, get_bragbook_settings

    get_base_settings.cache_clear()
    get_bragbook_settings.cache_clear()
    get_relay_executor.cache_clear()


@pytest.fixture
def make_spy_executor() -> type[SpyRelayExecutor]:
    """Factory para spies com resposta ou erro customizado."""
    return SpyRelayExecutor
