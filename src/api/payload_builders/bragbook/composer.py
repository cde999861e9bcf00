"""Composição de requests para a API BRAGBook a partir do descriptor.

Função pura: mesmo descriptor, conexão e parâmetros produzem sempre o
mesmo RequestSpec. Nenhum IO acontece aqui; parâmetros insuficientes
falham antes de qualquer RequestSpec existir.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from api.payload_builders.bragbook.params import resolve_params
from app.constants.bragbook import (
    BRAGBOOK_API_BASE_URL,
    AuthScheme,
    CredentialStyle,
    ParamLocation,
    Placement,
)
from app.protocols.models import RequestSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import ConnectionCredential, EndpointDescriptor

# Nome do campo de property id por estilo de credencial
_PROPERTY_ID_KEYS: dict[CredentialStyle, str] = {
    CredentialStyle.PLURAL: "websitePropertyIds",
    CredentialStyle.SINGULAR: "websitePropertyId",
    CredentialStyle.SINGULAR_LEGACY: "websitepropertyId",
}


def compose(
    descriptor: EndpointDescriptor,
    connection: ConnectionCredential,
    raw_params: Mapping[str, Any],
    base_url: str = BRAGBOOK_API_BASE_URL,
) -> RequestSpec:
    """Monta o RequestSpec de um endpoint.

    Args:
        descriptor: Descriptor do registry
        connection: Conexão já resolvida
        raw_params: Parâmetros brutos do chamador (strings do formulário)
        base_url: Host da API upstream

    Returns:
        RequestSpec imutável pronto para o relay.

    Raises:
        MissingParameter: Obrigatório ausente após merge de defaults.
        InvalidParameter: Tipo ou predicado de validade violado.
    """
    params = resolve_params(descriptor, raw_params)
    path = _substitute_path(descriptor, params)

    query: list[tuple[str, Any]] = []
    body: dict[str, Any] | None = None

    credentials = _credential_fields(descriptor, connection)
    if credentials:
        if descriptor.credentials_in is Placement.QUERY:
            query.extend(credentials.items())
        else:
            body = dict(credentials)

    payload = _payload_fields(descriptor, params)
    if payload:
        if descriptor.params_in is Placement.QUERY:
            query.extend(payload.items())
        else:
            body = {**(body or {}), **payload}

    headers = {"Accept": "application/json"}
    if body is not None:
        headers["Content-Type"] = "application/json"
    if descriptor.auth_scheme is AuthScheme.BEARER_HEADER:
        headers["Authorization"] = f"Bearer {connection.token}"

    url = base_url.rstrip("/") + path
    if query:
        url = f"{url}?{urlencode(query, doseq=True)}"

    return RequestSpec.build(
        endpoint_id=descriptor.endpoint_id,
        method=descriptor.method,
        url=url,
        headers=headers,
        body=body,
    )


def _substitute_path(descriptor: EndpointDescriptor, params: dict[str, Any]) -> str:
    path = descriptor.path_template
    for spec in descriptor.path_params:
        path = path.replace(f"{{{spec.name}}}", quote(str(params[spec.name]), safe=""))
    return path


def _credential_fields(
    descriptor: EndpointDescriptor,
    connection: ConnectionCredential,
) -> dict[str, Any]:
    """Campos de credencial na ordem em que vão para query/body."""
    fields: dict[str, Any] = {}
    scheme = descriptor.auth_scheme
    if scheme is AuthScheme.NONE:
        return fields

    if scheme is AuthScheme.QUERY_EMBEDDED_TOKEN:
        if descriptor.credential_style is CredentialStyle.PLURAL:
            fields["apiTokens"] = [connection.token]
        else:
            fields["apiToken"] = connection.token

    if descriptor.include_property_id:
        key = _PROPERTY_ID_KEYS[descriptor.credential_style]
        property_id = connection.website_property_id
        if descriptor.credential_style is CredentialStyle.PLURAL:
            fields[key] = [property_id]
        else:
            fields[key] = property_id
    return fields


def _payload_fields(descriptor: EndpointDescriptor, params: dict[str, Any]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for spec in descriptor.params:
        if spec.location is ParamLocation.PATH or spec.name not in params:
            continue
        value = params[spec.name]
        fields[spec.upstream_name] = [value] if spec.as_list else value
    return fields
