"""Endpoints de health check do relay."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.connectors.bragbook import ApiTestError
from app.bootstrap.dependencies import load_connections
from config.settings import get_bragbook_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: int | None = None
    errors: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "detail": self.detail,
            "errors": list(self.errors),
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="bragbook-relay",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness: settings do relay válidas e conexões pareáveis.

    Não chama a API upstream (validar token é um teste manual do admin).
    """
    config_check = _check_settings()
    connections_check = _check_connections()
    ready = config_check.status == "ok" and connections_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "settings": config_check.as_dict(),
            "connections": connections_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_settings() -> DependencyCheck:
    errors = get_bragbook_settings().validate()
    if errors:
        return DependencyCheck(status="failed", errors=tuple(errors))
    return DependencyCheck(status="ok")


def _check_connections() -> DependencyCheck:
    try:
        connections = load_connections()
    except ApiTestError as exc:
        logger.warning("readiness_connections_invalid", extra={"error_code": exc.error_code})
        return DependencyCheck(status="failed", errors=(exc.error_code,))
    if not connections:
        return DependencyCheck(status="failed", errors=("no_configured_connection",))
    return DependencyCheck(status="ok", detail=len(connections))
