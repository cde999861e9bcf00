"""Testes do registry de endpoints BRAGBook."""

from __future__ import annotations

import pytest

from api.connectors.bragbook import ENDPOINT_REGISTRY, UnknownEndpoint, list_endpoints, lookup
from api.connectors.bragbook.registry import (
    _DESCRIPTORS,
    _build_registry,
    is_auth_consistent,
)
from app.constants.bragbook import (
    ApiVersion,
    AuthScheme,
    EndpointId,
    HttpMethod,
    ParamLocation,
    Placement,
)
from app.protocols.models import EndpointDescriptor, ParamSpec


class TestRegistryConsistency:
    """Invariantes estruturais da tabela."""

    def test_every_endpoint_id_is_registered(self) -> None:
        assert set(ENDPOINT_REGISTRY) == set(EndpointId)

    def test_identifiers_are_unique(self) -> None:
        ids = [d.endpoint_id for d in _DESCRIPTORS]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("descriptor", list_endpoints(), ids=lambda d: d.endpoint_id.value)
    def test_auth_matches_api_version(self, descriptor: EndpointDescriptor) -> None:
        if descriptor.api_version is ApiVersion.V1:
            assert descriptor.auth_scheme is not AuthScheme.BEARER_HEADER
        else:
            assert descriptor.auth_scheme is AuthScheme.BEARER_HEADER

    @pytest.mark.parametrize("descriptor", list_endpoints(), ids=lambda d: d.endpoint_id.value)
    def test_path_params_appear_in_template(self, descriptor: EndpointDescriptor) -> None:
        for spec in descriptor.path_params:
            assert f"{{{spec.name}}}" in descriptor.path_template
            assert spec.required

    def test_get_endpoints_never_place_anything_in_body(self) -> None:
        for descriptor in list_endpoints():
            if descriptor.method is not HttpMethod.GET:
                continue
            assert descriptor.params_in is Placement.QUERY
            assert descriptor.credentials_in is Placement.QUERY

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ENDPOINT_REGISTRY[EndpointId.SIDEBAR] = None  # type: ignore[index]


class TestBuildRegistry:
    """Validações feitas na montagem da tabela."""

    def test_duplicate_id_raises(self) -> None:
        with pytest.raises(ValueError, match="duplicado"):
            _build_registry(_DESCRIPTORS + (_DESCRIPTORS[0],))

    def test_missing_id_raises(self) -> None:
        with pytest.raises(ValueError, match="sem descriptor"):
            _build_registry(_DESCRIPTORS[1:])

    def test_v1_with_bearer_raises(self) -> None:
        broken = EndpointDescriptor(
            endpoint_id=EndpointId.SIDEBAR,
            method=HttpMethod.POST,
            path_template="/api/plugin/combine/sidebar",
            api_version=ApiVersion.V1,
            auth_scheme=AuthScheme.BEARER_HEADER,
        )
        assert is_auth_consistent(broken) is False
        with pytest.raises(ValueError, match="incompatível"):
            _build_registry((broken,) + _DESCRIPTORS[1:])

    def test_get_with_body_params_raises(self) -> None:
        broken = EndpointDescriptor(
            endpoint_id=EndpointId.SIDEBAR,
            method=HttpMethod.GET,
            path_template="/api/plugin/combine/sidebar",
            api_version=ApiVersion.V1,
            auth_scheme=AuthScheme.QUERY_EMBEDDED_TOKEN,
            credentials_in=Placement.QUERY,
            params=(ParamSpec("count"),),
        )
        with pytest.raises(ValueError, match="GET sem body"):
            _build_registry((broken,) + _DESCRIPTORS[1:])


class TestLookup:
    """Testes para lookup."""

    def test_lookup_returns_descriptor(self) -> None:
        descriptor = lookup("single-case-v2")
        assert descriptor.endpoint_id is EndpointId.SINGLE_CASE_V2
        assert descriptor.method is HttpMethod.GET
        assert descriptor.path_template == "/api/plugin/v2/cases/{caseId}"
        assert descriptor.required_params == frozenset({"caseId"})

    def test_lookup_unknown_raises(self) -> None:
        with pytest.raises(UnknownEndpoint) as exc_info:
            lookup("does-not-exist")
        assert exc_info.value.error_code == "unknown_endpoint"
        assert exc_info.value.endpoint_id == "does-not-exist"

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(UnknownEndpoint):
            lookup("SIDEBAR")

    def test_terms_is_bearer_without_property_id(self) -> None:
        descriptor = lookup("terms")
        assert descriptor.auth_scheme is AuthScheme.BEARER_HEADER
        assert descriptor.include_property_id is False
        assert descriptor.params == ()

    def test_views_requires_case_id_in_payload(self) -> None:
        descriptor = lookup("views")
        (case_id,) = descriptor.params
        assert case_id.location is ParamLocation.PAYLOAD
        assert case_id.required and case_id.positive


class TestDescriptorAsDict:
    """Representação pública da tabela."""

    def test_as_dict_exposes_params_and_defaults(self) -> None:
        payload = lookup("cases-v2").as_dict()
        assert payload["id"] == "cases-v2"
        assert payload["method"] == "GET"
        assert payload["apiVersion"] == "v2"
        assert payload["authScheme"] == "bearer_header"
        assert payload["requiredParams"] == ["limit", "page", "procedureId"]
        assert payload["optionalParams"] == ["memberId"]
        assert payload["defaultParams"] == {"procedureId": 4168, "page": 1, "limit": 20}

    def test_list_endpoints_keeps_registration_order(self) -> None:
        ids = [d.endpoint_id for d in list_endpoints()]
        assert ids[0] is EndpointId.SIDEBAR
        assert ids == [d.endpoint_id for d in _DESCRIPTORS]
