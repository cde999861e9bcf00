"""Endpoints AJAX da tela de teste da API BRAGBook.

O browser envia só o id simbólico e os campos do formulário; token,
property id e host upstream ficam no servidor (relay same-origin).

Contrato de resposta (sempre HTTP 200, como o admin-ajax original):
    {"success": true,  "data": {status, body, headers, durationMs, request}}
    {"success": false, "data": {errorCode, message, ...}}
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from api.connectors.bragbook import ApiTestError, list_endpoints
from app.bootstrap.dependencies import create_api_test_use_case, load_connections
from app.protocols.models import ApiTestResult
from app.use_cases.api_test import ApiTestPhase, RunEndpointTestUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


class ApiTestRequest(BaseModel):
    """Payload de uma invocação de teste."""

    model_config = ConfigDict(populate_by_name=True)

    endpoint_id: str = Field(alias="endpointId", min_length=1)
    raw_params: dict[str, StrictStr | StrictInt | None] = Field(
        default_factory=dict, alias="rawParams"
    )
    connection_index: int = Field(default=0, alias="connectionIndex")


def _result_response(result: ApiTestResult) -> JSONResponse:
    return JSONResponse(content={"success": result.success, "data": result.as_dict()})


@router.post("")
async def run_api_test(payload: ApiTestRequest) -> JSONResponse:
    """Executa um endpoint pelo relay e devolve o envelope normalizado."""
    try:
        use_case = create_api_test_use_case()
    except ApiTestError as exc:
        # Conexões mal configuradas (ex: listas desencontradas)
        result = RunEndpointTestUseCase.failure_result(
            exc, payload.endpoint_id, ApiTestPhase.VALIDATING
        )
        return _result_response(result)

    result = await use_case.execute(
        payload.endpoint_id,
        payload.raw_params,
        connection_index=payload.connection_index,
    )
    return _result_response(result)


@router.get("/endpoints")
async def get_endpoints() -> dict[str, Any]:
    """Tabela de endpoints testáveis (id, método, path, versão, parâmetros)."""
    return {"endpoints": [descriptor.as_dict() for descriptor in list_endpoints()]}


@router.get("/connections")
async def get_connections() -> JSONResponse:
    """Conexões configuradas com token mascarado, para o seletor da tela."""
    try:
        connections = load_connections()
    except ApiTestError as exc:
        logger.warning("api_test_connections_invalid", extra={"error_code": exc.error_code})
        return JSONResponse(
            content={
                "success": False,
                "data": {"errorCode": exc.error_code, "message": str(exc)},
            }
        )
    return JSONResponse(
        content={
            "success": True,
            "data": {
                "connections": [
                    {
                        "index": index,
                        "token": connection.masked_token,
                        "websitePropertyId": connection.website_property_id,
                    }
                    for index, connection in enumerate(connections)
                ]
            },
        }
    )
