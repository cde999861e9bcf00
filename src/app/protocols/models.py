"""Contratos canônicos do harness de teste da API BRAGBook.

Modelos imutáveis compartilhados entre registry, composer, relay,
normalizer e a borda HTTP. Nenhum modelo carrega token em claro no repr.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from app.constants.bragbook import (
    ApiVersion,
    AuthScheme,
    CredentialStyle,
    EndpointId,
    HttpMethod,
    ParamKind,
    ParamLocation,
    Placement,
)
from utils.masking import mask_authorization, mask_payload, mask_secret, mask_url


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """Declaração de um parâmetro aceito por um endpoint.

    Attributes:
        name: Nome recebido do chamador (ex: caseId)
        kind: Tipo declarado (int|str), coerção estrita
        required: Deve estar presente após merge de defaults
        default: Valor de fallback (None = sem default)
        location: PATH (template) ou PAYLOAD (query/body)
        wire_name: Nome enviado ao upstream (default: name)
        as_list: Envia o valor dentro de uma lista (ex: procedureIds)
        positive: Exige inteiro > 0
    """

    name: str
    kind: ParamKind = ParamKind.STR
    required: bool = False
    default: int | str | None = None
    location: ParamLocation = ParamLocation.PAYLOAD
    wire_name: str | None = None
    as_list: bool = False
    positive: bool = False

    @property
    def upstream_name(self) -> str:
        return self.wire_name or self.name


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """Metadados estáticos para montar o request de um endpoint."""

    endpoint_id: EndpointId
    method: HttpMethod
    path_template: str
    api_version: ApiVersion
    auth_scheme: AuthScheme
    description: str = ""
    credentials_in: Placement = Placement.BODY
    credential_style: CredentialStyle = CredentialStyle.PLURAL
    include_property_id: bool = True
    params: tuple[ParamSpec, ...] = ()
    params_in: Placement = Placement.BODY

    @property
    def required_params(self) -> frozenset[str]:
        return frozenset(p.name for p in self.params if p.required)

    @property
    def optional_params(self) -> frozenset[str]:
        return frozenset(p.name for p in self.params if not p.required)

    @property
    def default_params(self) -> dict[str, int | str]:
        return {p.name: p.default for p in self.params if p.default is not None}

    @property
    def path_params(self) -> tuple[ParamSpec, ...]:
        return tuple(p for p in self.params if p.location is ParamLocation.PATH)

    def as_dict(self) -> dict[str, Any]:
        """Representação para a tabela de endpoints da tela de teste."""
        return {
            "id": self.endpoint_id.value,
            "method": self.method.value,
            "path": self.path_template,
            "apiVersion": self.api_version.value,
            "authScheme": self.auth_scheme.value,
            "description": self.description,
            "requiredParams": sorted(self.required_params),
            "optionalParams": sorted(self.optional_params),
            "defaultParams": self.default_params,
        }


@dataclass(frozen=True, slots=True)
class ConnectionCredential:
    """Par (token, website property id) de uma conta upstream."""

    token: str = field(repr=False)
    website_property_id: int

    @property
    def masked_token(self) -> str:
        return mask_secret(self.token, visible=10)


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """Request composto, pronto para o relay.

    O body é guardado já serializado (JSON canônico, chaves ordenadas),
    então duas composições iguais são idênticas byte a byte.
    """

    endpoint_id: EndpointId
    method: HttpMethod
    url: str
    headers: tuple[tuple[str, str], ...] = ()
    body_json: str | None = None

    @classmethod
    def build(
        cls,
        endpoint_id: EndpointId,
        method: HttpMethod,
        url: str,
        headers: dict[str, str],
        body: Any = None,
    ) -> RequestSpec:
        body_json = None
        if body is not None:
            body_json = json.dumps(
                body, sort_keys=True, separators=(",", ":"), ensure_ascii=False
            )
        return cls(
            endpoint_id=endpoint_id,
            method=method,
            url=url,
            headers=tuple(headers.items()),
            body_json=body_json,
        )

    @property
    def body(self) -> Any:
        if self.body_json is None:
            return None
        return json.loads(self.body_json)

    def body_bytes(self) -> bytes | None:
        if self.body_json is None:
            return None
        return self.body_json.encode("utf-8")

    def header(self, name: str) -> str | None:
        """Busca header sem diferenciar maiúsculas/minúsculas."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def has_header(self, name: str) -> bool:
        return self.header(name) is not None

    def describe(self) -> dict[str, Any]:
        """Detalhes do request para exibição, com segredos mascarados."""
        headers = {
            key: mask_authorization(value) if key.lower() == "authorization" else value
            for key, value in self.headers
        }
        return {
            "url": mask_url(self.url),
            "method": self.method.value,
            "headers": headers,
            "body": mask_payload(self.body),
        }


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Resultado bruto do transporte, antes da normalização."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Resposta normalizada entregue à camada de apresentação."""

    status: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "body": self.body,
            "headers": self.headers,
            "durationMs": self.duration_ms,
        }


@dataclass(frozen=True, slots=True)
class ApiTestFailure:
    """Erro estruturado de uma invocação (nunca exceção para o chamador)."""

    error_code: str
    message: str
    transport_kind: str | None = None
    parameter: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"errorCode": self.error_code, "message": self.message}
        if self.transport_kind is not None:
            payload["transportKind"] = self.transport_kind
        if self.parameter is not None:
            payload["parameter"] = self.parameter
        return payload


@dataclass(frozen=True, slots=True)
class ApiTestResult:
    """Resultado de uma invocação: envelope OU falha, nunca ambos."""

    envelope: ResponseEnvelope | None = None
    failure: ApiTestFailure | None = None
    request: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if (self.envelope is None) == (self.failure is None):
            raise ValueError("ApiTestResult exige exatamente um de envelope/failure")

    @property
    def success(self) -> bool:
        return self.envelope is not None

    def as_dict(self) -> dict[str, Any]:
        payload = self.envelope.as_dict() if self.envelope else self.failure.as_dict()  # type: ignore[union-attr]
        if self.request is not None:
            payload["request"] = self.request
        return payload
