import httpx
import pytest

from bscscan_node import RequestSpec, TransportError, execute_request, normalize_response

from conftest import json_response

SPEC = RequestSpec(
    url="https://api.bscscan.com/api",
    query_params=(("module", "account"), ("action", "balance"), ("address", "0xabc"), ("apikey", "K")),
)


class TestExecuteRequest:
    """HTTP 실행기"""

    async def test_sends_single_get_with_json_content_type(self, make_transport):
        transport = make_transport(lambda request: json_response({"status": "1", "result": "10"}))

        async with transport.client() as client:
            payload = await execute_request(SPEC, client=client)

        assert payload == {"status": "1", "result": "10"}
        assert transport.call_count == 1
        request = transport.requests[0]
        assert request.method == "GET"
        assert request.headers["content-type"] == "application/json"
        assert request.url.host == "api.bscscan.com"
        assert dict(request.url.params) == {"module": "account", "action": "balance", "address": "0xabc", "apikey": "K"}

    async def test_connection_failure_raises_transport_error(self, make_transport):
        def handler(request):
            raise httpx.ConnectError("Connection reset by peer", request=request)

        transport = make_transport(handler)
        async with transport.client() as client:
            with pytest.raises(TransportError, match="Connection reset") as exc_info:
                await execute_request(SPEC, client=client)

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)

    async def test_http_error_status_keeps_upstream_body(self, make_transport):
        body = {"status": "0", "message": "NOTOK", "result": "Invalid API Key"}
        transport = make_transport(lambda request: json_response(body, status_code=403))

        async with transport.client() as client:
            with pytest.raises(TransportError) as exc_info:
                await execute_request(SPEC, client=client)

        assert exc_info.value.status_code == 403
        assert exc_info.value.response_body == body

    async def test_invalid_url_raises_transport_error(self, make_transport):
        spec = RequestSpec(url="https://api.bscscan.com/\x00api", query_params=SPEC.query_params)
        transport = make_transport(lambda request: json_response({"status": "1"}))

        async with transport.client() as client:
            with pytest.raises(TransportError) as exc_info:
                await execute_request(spec, client=client)

        assert isinstance(exc_info.value.original_error, httpx.InvalidURL)
        assert transport.call_count == 0

    async def test_error_status_without_body(self, make_transport):
        transport = make_transport(lambda request: httpx.Response(status_code=502))

        async with transport.client() as client:
            with pytest.raises(TransportError, match="502") as exc_info:
                await execute_request(SPEC, client=client)

        assert exc_info.value.response_body is None

    async def test_non_json_body_raises_transport_error(self, make_transport):
        transport = make_transport(lambda request: httpx.Response(status_code=200, text="<html>maintenance</html>"))

        async with transport.client() as client:
            with pytest.raises(TransportError, match="non-JSON") as exc_info:
                await execute_request(SPEC, client=client)

        assert exc_info.value.response_body == "<html>maintenance</html>"

    async def test_injected_client_is_not_closed(self, make_transport):
        transport = make_transport(lambda request: json_response({"status": "1"}))
        client = transport.client()

        await execute_request(SPEC, client=client)

        assert not client.is_closed
        await client.aclose()


class TestNormalizeResponse:
    """응답 정규화"""

    def test_array_payload_keeps_order(self):
        payload = [{"status": "1"}, {"status": "0"}]
        assert normalize_response(payload) == [{"status": "1"}, {"status": "0"}]

    def test_object_payload_becomes_single_record(self):
        assert normalize_response({"status": "1"}) == [{"status": "1"}]

    def test_wrapper_fields_are_not_unwrapped(self):
        payload = {"status": "1", "message": "OK", "result": [{"account": "0x1", "balance": "40891626854930000000000"}]}
        assert normalize_response(payload) == [payload]
