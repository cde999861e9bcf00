"""Enums de domínio para a API BRAGBook e o harness de teste."""

from __future__ import annotations

from enum import StrEnum

# Constantes da API upstream
BRAGBOOK_API_BASE_URL: str = "https://app.bragbookgallery.com"
RELAY_VERSION: str = "3.3.2"
RELAY_USER_AGENT: str = f"BRAGBookGallery-Relay/{RELAY_VERSION}"


class EndpointId(StrEnum):
    """Identificadores simbólicos dos endpoints testáveis."""

    SIDEBAR = "sidebar"
    CASES = "cases"
    CAROUSEL = "carousel"
    FILTERS = "filters"
    FAVORITES_LIST = "favorites-list"
    SITEMAP = "sitemap"
    SINGLE_CASE = "single-case"
    CONSULTATIONS = "consultations"
    VIEWS = "views"
    TERMS = "terms"
    CASES_V2 = "cases-v2"
    SINGLE_CASE_V2 = "single-case-v2"
    VALIDATE_TOKEN = "validate-token"
    CONSULTATIONS_V2 = "consultations-v2"
    FAVORITES_LIST_V2 = "favorites-list-v2"


class HttpMethod(StrEnum):
    """Métodos HTTP usados pela API BRAGBook."""

    GET = "GET"
    POST = "POST"


class ApiVersion(StrEnum):
    """Convenções de chamada da API."""

    V1 = "v1"
    V2 = "v2"


class AuthScheme(StrEnum):
    """Onde o token de acesso viaja no request."""

    QUERY_EMBEDDED_TOKEN = "query_embedded_token"
    BEARER_HEADER = "bearer_header"
    NONE = "none"


class Placement(StrEnum):
    """Destino de credenciais/parâmetros no request."""

    BODY = "body"
    QUERY = "query"


class CredentialStyle(StrEnum):
    """Formato das credenciais embutidas (v1).

    - PLURAL: `apiTokens` / `websitePropertyIds` como arrays
    - SINGULAR: `apiToken` / `websitePropertyId`
    - SINGULAR_LEGACY: `apiToken` / `websitepropertyId` (grafia do endpoint
      de consultas v1)
    """

    PLURAL = "plural"
    SINGULAR = "singular"
    SINGULAR_LEGACY = "singular_legacy"


class ParamKind(StrEnum):
    """Tipo declarado de um parâmetro."""

    INT = "int"
    STR = "str"


class ParamLocation(StrEnum):
    """Parâmetro de path (substituído no template) ou de payload."""

    PATH = "path"
    PAYLOAD = "payload"
