"""Registry estático dos endpoints testáveis da API BRAGBook.

Tabela declarativa indexada por `EndpointId`. Cada descriptor diz como
montar o request (método, path, versão, autenticação e parâmetros);
a montagem em si fica em api/payload_builders/bragbook.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from api.connectors.bragbook.errors import UnknownEndpoint
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
from app.protocols.models import EndpointDescriptor, ParamSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

# Valores de exemplo usados pela tela de teste quando o admin não informa nada
DEFAULT_V1_PROCEDURE_ID = 6851
DEFAULT_CAROUSEL_PROCEDURE_ID = 3405
DEFAULT_V2_PROCEDURE_ID = 4168

_CASE_ID = ParamSpec(
    "caseId",
    kind=ParamKind.INT,
    required=True,
    location=ParamLocation.PATH,
    positive=True,
)
_MEMBER_ID = ParamSpec("memberId", kind=ParamKind.INT, positive=True)
_SAMPLE_CONSULTATION = (
    ParamSpec("email", required=True, default="test@example.com"),
    ParamSpec("phone", required=True, default="(555) 123-4567"),
    ParamSpec("name", required=True, default="Test User"),
    ParamSpec(
        "details",
        required=True,
        default="This is a test consultation submission from the API testing page.",
    ),
)


def _v1(
    endpoint_id: EndpointId,
    method: HttpMethod,
    path: str,
    description: str,
    **kwargs: object,
) -> EndpointDescriptor:
    return EndpointDescriptor(
        endpoint_id=endpoint_id,
        method=method,
        path_template=path,
        api_version=ApiVersion.V1,
        auth_scheme=AuthScheme.QUERY_EMBEDDED_TOKEN,
        description=description,
        **kwargs,  # type: ignore[arg-type]
    )


def _v2(
    endpoint_id: EndpointId,
    method: HttpMethod,
    path: str,
    description: str,
    **kwargs: object,
) -> EndpointDescriptor:
    return EndpointDescriptor(
        endpoint_id=endpoint_id,
        method=method,
        path_template=path,
        api_version=ApiVersion.V2,
        auth_scheme=AuthScheme.BEARER_HEADER,
        description=description,
        credentials_in=Placement.QUERY,
        credential_style=CredentialStyle.SINGULAR,
        params_in=Placement.QUERY,
        **kwargs,  # type: ignore[arg-type]
    )


_DESCRIPTORS: tuple[EndpointDescriptor, ...] = (
    # ── v1: credenciais embutidas no body/query ────────────────────────────
    _v1(
        EndpointId.SIDEBAR,
        HttpMethod.POST,
        "/api/plugin/combine/sidebar",
        "Categorias e procedimentos com contagem de casos",
        include_property_id=False,
    ),
    _v1(
        EndpointId.CASES,
        HttpMethod.POST,
        "/api/plugin/combine/cases",
        "Listagem paginada de casos",
        params=(
            ParamSpec("count", kind=ParamKind.INT, required=True, default=1, positive=True),
            ParamSpec(
                "procedureId",
                kind=ParamKind.INT,
                wire_name="procedureIds",
                as_list=True,
                positive=True,
            ),
            _MEMBER_ID,
        ),
    ),
    _v1(
        EndpointId.CAROUSEL,
        HttpMethod.GET,
        "/api/plugin/carousel",
        "Dados de carrossel (requer procedureId)",
        credentials_in=Placement.QUERY,
        credential_style=CredentialStyle.SINGULAR,
        params_in=Placement.QUERY,
        params=(
            ParamSpec("start", kind=ParamKind.INT, required=True, default=1, positive=True),
            ParamSpec("limit", kind=ParamKind.INT, required=True, default=10, positive=True),
            ParamSpec(
                "procedureId",
                kind=ParamKind.INT,
                required=True,
                default=DEFAULT_CAROUSEL_PROCEDURE_ID,
                positive=True,
            ),
        ),
    ),
    _v1(
        EndpointId.FILTERS,
        HttpMethod.POST,
        "/api/plugin/combine/filters",
        "Opções de filtro disponíveis",
        params=(
            ParamSpec(
                "procedureId",
                kind=ParamKind.INT,
                required=True,
                default=DEFAULT_V1_PROCEDURE_ID,
                wire_name="procedureIds",
                as_list=True,
                positive=True,
            ),
        ),
    ),
    _v1(
        EndpointId.FAVORITES_LIST,
        HttpMethod.POST,
        "/api/plugin/combine/favorites/list",
        "Casos favoritos de um usuário",
        params=(ParamSpec("email", required=True, default="test@example.com"),),
    ),
    _v1(
        EndpointId.SITEMAP,
        HttpMethod.POST,
        "/api/plugin/sitemap",
        "Dados de sitemap",
    ),
    _v1(
        EndpointId.SINGLE_CASE,
        HttpMethod.POST,
        "/api/plugin/combine/cases/{caseId}",
        "Detalhes de um caso",
        params=(
            _CASE_ID,
            ParamSpec(
                "procedureId",
                kind=ParamKind.INT,
                required=True,
                default=DEFAULT_V1_PROCEDURE_ID,
                wire_name="procedureIds",
                as_list=True,
                positive=True,
            ),
            _MEMBER_ID,
        ),
    ),
    _v1(
        EndpointId.CONSULTATIONS,
        HttpMethod.POST,
        "/api/plugin/consultations",
        "Envio de consulta (dados de exemplo)",
        credentials_in=Placement.QUERY,
        credential_style=CredentialStyle.SINGULAR_LEGACY,
        params=_SAMPLE_CONSULTATION,
    ),
    _v1(
        EndpointId.VIEWS,
        HttpMethod.POST,
        "/api/plugin/views",
        "Registro de visualização de caso",
        credentials_in=Placement.QUERY,
        credential_style=CredentialStyle.SINGULAR,
        include_property_id=False,
        params=(
            ParamSpec("caseId", kind=ParamKind.INT, required=True, positive=True),
        ),
    ),
    # ── v2: Bearer no header, identificadores na query ─────────────────────
    _v2(
        EndpointId.TERMS,
        HttpMethod.GET,
        "/api/plugin/v2/terms",
        "Termos de uso da conta",
        include_property_id=False,
    ),
    _v2(
        EndpointId.CASES_V2,
        HttpMethod.GET,
        "/api/plugin/v2/cases",
        "Listagem paginada de casos (requer procedureId)",
        params=(
            ParamSpec(
                "procedureId",
                kind=ParamKind.INT,
                required=True,
                default=DEFAULT_V2_PROCEDURE_ID,
                positive=True,
            ),
            ParamSpec("page", kind=ParamKind.INT, required=True, default=1, positive=True),
            ParamSpec("limit", kind=ParamKind.INT, required=True, default=20, positive=True),
            ParamSpec("memberId"),
        ),
    ),
    _v2(
        EndpointId.SINGLE_CASE_V2,
        HttpMethod.GET,
        "/api/plugin/v2/cases/{caseId}",
        "Detalhes de um caso",
        params=(
            _CASE_ID,
            ParamSpec("procedureId", kind=ParamKind.INT, positive=True),
            ParamSpec("memberId"),
        ),
    ),
    _v2(
        EndpointId.VALIDATE_TOKEN,
        HttpMethod.GET,
        "/api/plugin/v2/validation/token",
        "Validação do token de API",
    ),
    _v2(
        EndpointId.CONSULTATIONS_V2,
        HttpMethod.POST,
        "/api/plugin/v2/leads/consultations",
        "Envio de consulta (dados de exemplo)",
        params=_SAMPLE_CONSULTATION,
    ),
    _v2(
        EndpointId.FAVORITES_LIST_V2,
        HttpMethod.POST,
        "/api/plugin/v2/leads/favorites/list",
        "Casos favoritos de um usuário",
        params=(ParamSpec("email", required=True, default="test@example.com"),),
    ),
)


def _build_registry(
    descriptors: tuple[EndpointDescriptor, ...],
) -> Mapping[EndpointId, EndpointDescriptor]:
    registry: dict[EndpointId, EndpointDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.endpoint_id in registry:
            raise ValueError(f"Endpoint duplicado no registry: {descriptor.endpoint_id}")
        if not is_auth_consistent(descriptor):
            raise ValueError(
                f"Auth {descriptor.auth_scheme} incompatível com "
                f"{descriptor.api_version} em {descriptor.endpoint_id}"
            )
        if descriptor.method is HttpMethod.GET and _uses_body(descriptor):
            raise ValueError(f"GET sem body: {descriptor.endpoint_id} usa Placement.BODY")
        registry[descriptor.endpoint_id] = descriptor
    missing = set(EndpointId) - set(registry)
    if missing:
        raise ValueError(f"Endpoints sem descriptor: {sorted(missing)}")
    return MappingProxyType(registry)


def is_auth_consistent(descriptor: EndpointDescriptor) -> bool:
    """v1 nunca usa Bearer; v2 sempre usa Bearer."""
    if descriptor.api_version is ApiVersion.V1:
        return descriptor.auth_scheme is not AuthScheme.BEARER_HEADER
    return descriptor.auth_scheme is AuthScheme.BEARER_HEADER


def _uses_body(descriptor: EndpointDescriptor) -> bool:
    embeds_credentials = (
        descriptor.auth_scheme is AuthScheme.QUERY_EMBEDDED_TOKEN
        or descriptor.include_property_id
    )
    if descriptor.credentials_in is Placement.BODY and embeds_credentials:
        return True
    payload_params = [p for p in descriptor.params if p.location is ParamLocation.PAYLOAD]
    return descriptor.params_in is Placement.BODY and bool(payload_params)


ENDPOINT_REGISTRY = _build_registry(_DESCRIPTORS)


def lookup(endpoint_id: str) -> EndpointDescriptor:
    """Retorna o descriptor do endpoint.

    Raises:
        UnknownEndpoint: Se o id não pertence ao EndpointId.
    """
    try:
        key = EndpointId(endpoint_id)
    except ValueError:
        raise UnknownEndpoint(str(endpoint_id)) from None
    return ENDPOINT_REGISTRY[key]


def list_endpoints() -> list[EndpointDescriptor]:
    """Todos os descriptors na ordem de registro."""
    return list(ENDPOINT_REGISTRY.values())
