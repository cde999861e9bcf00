"""Testes para RunEndpointTestUseCase."""

from __future__ import annotations

import asyncio
import logging

import pytest

from api.connectors.bragbook import TransportError, TransportErrorKind, list_endpoints
from app.constants.bragbook import EndpointId, HttpMethod, ParamKind
from app.protocols.models import RawResponse
from app.use_cases.api_test import RunEndpointTestUseCase

BASE_URL = "https://api.test"

REQUIRED_WITHOUT_DEFAULT = [
    (descriptor, spec.name)
    for descriptor in list_endpoints()
    for spec in descriptor.params
    if spec.required and spec.default is None
]


def _valid_params(descriptor) -> dict[str, str]:
    return {
        spec.name: "5" if spec.kind is ParamKind.INT else "valor"
        for spec in descriptor.params
    }


@pytest.fixture
def use_case(spy_executor, connections) -> RunEndpointTestUseCase:
    return RunEndpointTestUseCase(
        executor=spy_executor,
        connections=connections,
        base_url=BASE_URL,
        timeout_ms=1500,
    )


class TestSuccessfulRun:
    """Caminho feliz: compose → relay → normalize."""

    @pytest.mark.asyncio
    async def test_returns_normalized_envelope(self, use_case, spy_executor) -> None:
        result = await use_case.execute("terms")

        assert result.success is True
        assert result.failure is None
        assert result.envelope.status == 200
        assert result.envelope.body == {"success": True}
        assert result.envelope.duration_ms == 5.0

        ((spec, timeout_ms),) = spy_executor.calls
        assert spec.endpoint_id is EndpointId.TERMS
        assert spec.method is HttpMethod.GET
        assert spec.url == f"{BASE_URL}/api/plugin/v2/terms"
        assert timeout_ms == 1500

    @pytest.mark.asyncio
    async def test_uses_selected_connection(self, use_case, spy_executor) -> None:
        await use_case.execute("validate-token", {}, connection_index=1)

        ((spec, _),) = spy_executor.calls
        assert spec.header("Authorization") == "Bearer def456"
        assert "websitePropertyId=99" in spec.url

    @pytest.mark.asyncio
    async def test_non_2xx_is_still_an_envelope(self, make_spy_executor, connections) -> None:
        executor = make_spy_executor(
            response=RawResponse(status=401, body="Unauthorized", headers={}, elapsed_ms=2.0)
        )
        use_case = RunEndpointTestUseCase(executor, connections, base_url=BASE_URL)

        result = await use_case.execute("sidebar")

        assert result.success is True
        assert result.envelope.status == 401
        assert result.envelope.body == "Unauthorized"
        assert result.envelope.is_success is False

    @pytest.mark.asyncio
    async def test_request_details_are_masked(self, use_case) -> None:
        result = await use_case.execute("cases", {"procedureId": "77"})

        payload = result.as_dict()
        assert payload["request"]["method"] == "POST"
        assert "abc123" not in str(payload)

    @pytest.mark.asyncio
    async def test_concurrent_invocations_are_independent(self, use_case, spy_executor) -> None:
        results = await asyncio.gather(
            use_case.execute("single-case-v2", {"caseId": "1"}),
            use_case.execute("single-case-v2", {"caseId": "2"}),
            use_case.execute("single-case-v2", {}),
        )

        assert [r.success for r in results] == [True, True, False]
        urls = sorted(spec.url for spec, _ in spy_executor.calls)
        assert len(urls) == 2
        assert "/cases/1?" in urls[0]
        assert "/cases/2?" in urls[1]


class TestValidationFailures:
    """Falhas de validação nunca chegam ao relay."""

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, use_case, spy_executor) -> None:
        result = await use_case.execute("nope")

        assert result.success is False
        assert result.failure.error_code == "unknown_endpoint"
        assert result.request is None
        assert spy_executor.calls == []

    def test_every_endpoint_with_case_id_requires_it(self) -> None:
        ids = {descriptor.endpoint_id for descriptor, _ in REQUIRED_WITHOUT_DEFAULT}
        assert {EndpointId.SINGLE_CASE, EndpointId.SINGLE_CASE_V2, EndpointId.VIEWS} <= ids

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("descriptor", "param"),
        REQUIRED_WITHOUT_DEFAULT,
        ids=[f"{d.endpoint_id.value}-{name}" for d, name in REQUIRED_WITHOUT_DEFAULT],
    )
    @pytest.mark.parametrize("blank", ["omitted", "", None])
    async def test_missing_parameter(
        self, use_case, spy_executor, descriptor, param: str, blank: str | None
    ) -> None:
        raw_params: dict[str, str | None] = _valid_params(descriptor)
        if blank == "omitted":
            del raw_params[param]
        else:
            raw_params[param] = blank

        result = await use_case.execute(descriptor.endpoint_id.value, raw_params)

        assert result.success is False
        assert result.failure.error_code == "missing_parameter"
        assert result.failure.parameter == param
        assert spy_executor.calls == []

    @pytest.mark.asyncio
    async def test_invalid_parameter(self, use_case, spy_executor) -> None:
        result = await use_case.execute("views", {"caseId": "0"})

        assert result.as_dict() == {
            "errorCode": "invalid_parameter",
            "message": "Parâmetro inválido caseId: must be positive",
            "parameter": "caseId",
        }
        assert spy_executor.calls == []

    @pytest.mark.asyncio
    async def test_no_configured_connection(self, spy_executor) -> None:
        use_case = RunEndpointTestUseCase(spy_executor, connections=(), base_url=BASE_URL)

        result = await use_case.execute("sidebar")

        assert result.failure.error_code == "no_configured_connection"
        assert spy_executor.calls == []

    @pytest.mark.asyncio
    async def test_connection_index_out_of_range(self, use_case, spy_executor) -> None:
        result = await use_case.execute("sidebar", connection_index=5)

        assert result.failure.error_code == "connection_index_out_of_range"
        assert spy_executor.calls == []

    @pytest.mark.asyncio
    async def test_failure_is_logged_without_token(
        self, use_case, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            await use_case.execute("views", {"caseId": "abc"})

        (record,) = [r for r in caplog.records if r.getMessage() == "api_test_failed"]
        assert record.error_code == "invalid_parameter"
        assert record.phase == "validating"
        assert "abc123" not in caplog.text


class TestTransportFailures:
    """Falhas de rede viram ApiTestFailure tipada."""

    @pytest.mark.asyncio
    async def test_timeout_has_no_status(self, make_spy_executor, connections) -> None:
        executor = make_spy_executor(
            error=TransportError(TransportErrorKind.TIMEOUT, "Request excedeu o timeout de 10ms")
        )
        use_case = RunEndpointTestUseCase(executor, connections, base_url=BASE_URL, timeout_ms=10)

        result = await use_case.execute("terms")

        assert result.success is False
        assert result.envelope is None
        payload = result.as_dict()
        assert "status" not in payload
        assert payload["errorCode"] == "transport_error"
        assert payload["transportKind"] == "timeout"
        assert payload["request"]["url"] == f"{BASE_URL}/api/plugin/v2/terms"
        assert len(executor.calls) == 1
