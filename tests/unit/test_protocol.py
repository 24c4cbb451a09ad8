"""Unit tests for envelope building, serialization and parsing."""

import json
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from zabbix_api.core.errors import UnsupportedPayloadError
from zabbix_api.entities.host import CreateHostRequest, HostInterface
from zabbix_api.entities.hostgroup import CreateHostGroupRequest, HostGroup, HostGroupId
from zabbix_api.entities.macro import CreateHostMacro
from zabbix_api.entities.usergroup import CreateUserGroupRequest
from zabbix_api.rpc.protocol import (
    build_request,
    decode_result,
    encode_params,
    parse_response,
    serialize_request,
)
from zabbix_api.rpc.types import AuthMode, ErrorDetail, Request


class TestBuildRequest:
    """Tests for build_request auth placement."""

    def test_bearer_mode_never_puts_token_in_body(self):
        request = build_request("host.get", {}, "token-1", AuthMode.BEARER)

        assert request.auth is None
        assert request.jsonrpc == "2.0"
        assert request.method == "host.get"
        assert request.id == 1

    def test_body_mode_puts_token_in_body(self):
        request = build_request("host.get", {}, "token-1", AuthMode.BODY)

        assert request.auth == "token-1"

    def test_body_mode_without_session_has_no_auth(self):
        request = build_request("user.login", {}, None, AuthMode.BODY)

        assert request.auth is None


class TestSerializeRequest:
    """Tests for serialize_request function."""

    def test_auth_member_omitted_when_not_set(self):
        """auth is left out entirely, not sent as null."""
        data = json.loads(serialize_request(Request(jsonrpc="2.0", method="host.get", params={})))

        assert "auth" not in data
        assert data == {"jsonrpc": "2.0", "method": "host.get", "params": {}, "id": 1}

    def test_auth_member_included_when_set(self):
        request = Request(jsonrpc="2.0", method="host.get", params={}, auth="abc")
        data = json.loads(serialize_request(request))

        assert data["auth"] == "abc"

    def test_none_params_become_empty_object(self):
        data = json.loads(serialize_request(Request(jsonrpc="2.0", method="apiinfo.version")))

        assert data["params"] == {}

    def test_model_params_use_wire_names(self):
        request = Request(
            jsonrpc="2.0",
            method="hostgroup.get",
            params={"output": "extend", "groups": [HostGroup(group_id="7", name="db")]},
        )
        data = json.loads(serialize_request(request))

        assert data["params"]["groups"] == [{"groupid": "7", "name": "db"}]

    def test_unset_optional_fields_are_dropped(self):
        request = Request(
            jsonrpc="2.0",
            method="usergroup.create",
            params=CreateUserGroupRequest(name="ops", gui_access=2),
        )
        data = json.loads(serialize_request(request))

        assert data["params"] == {"name": "ops", "gui_access": 2}

    def test_list_params_pass_through(self):
        request = Request(jsonrpc="2.0", method="host.delete", params=["10", "11"])
        data = json.loads(serialize_request(request))

        assert data["params"] == ["10", "11"]


class TestEncodeParams:
    """Params of any serializable shape are accepted."""

    def test_dataclass(self):
        @dataclass
        class Filter:
            host: list[str]

        assert encode_params({"filter": Filter(host=["srv-1"])}) == {"filter": {"host": ["srv-1"]}}

    def test_model(self):
        assert encode_params(CreateHostGroupRequest(name="g")) == {"name": "g"}

    def test_unserializable_raises_type_error(self):
        with pytest.raises(TypeError):
            encode_params({"value": object()})


@dataclass
class HostFilter:
    host: list[str]
    status: int = 0


class TestParamsRoundTrip:
    """Serialized params decode back to the value that was sent."""

    @pytest.mark.parametrize(
        "params",
        [
            {"output": "extend", "filter": {"host": ["srv-1"]}, "limit": 5},
            ["10084", "10085"],
            HostFilter(host=["srv-1", "srv-2"], status=1),
            CreateHostRequest(
                host="srv-1",
                groups=[HostGroupId(group_id="2")],
                interfaces=[HostInterface(ip="10.0.0.1"), HostInterface(type=2, port="161")],
                macros=[
                    CreateHostMacro.text("{$PORT}", "8080"),
                    CreateHostMacro.secret("{$PASSWORD}", "s3cr3t", description="db"),
                ],
                inventory={"os": "linux"},
            ),
        ],
        ids=["dict", "list", "dataclass", "model"],
    )
    def test_round_trip(self, params: Any):
        request = Request(jsonrpc="2.0", method="x.create", params=params)
        sent = json.loads(serialize_request(request))["params"]

        assert decode_result(sent, type(params)) == params


class TestParseResponse:
    """Tests for parse_response function."""

    def test_parse_result(self):
        response = parse_response('{"jsonrpc":"2.0","result":"7.0.0","id":1}')

        assert response.result == "7.0.0"
        assert response.error is None
        assert response.id == 1

    def test_parse_error(self):
        body = json.dumps({
            "jsonrpc": "2.0",
            "error": {"code": -32602, "message": "Invalid params.", "data": "Not authorized."},
            "id": 1,
        })
        response = parse_response(body)

        assert response.result is None
        assert response.error == ErrorDetail(-32602, "Invalid params.", "Not authorized.")

    def test_error_without_data_defaults_to_empty(self):
        response = parse_response(
            '{"jsonrpc":"2.0","error":{"code":-32600,"message":"Invalid request."},"id":1}'
        )

        assert response.error == ErrorDetail(-32600, "Invalid request.", "")

    def test_neither_result_nor_error_is_not_a_decode_failure(self):
        response = parse_response('{"jsonrpc":"2.0","id":1}')

        assert response.result is None
        assert response.error is None

    @pytest.mark.parametrize(
        "body",
        [
            "not valid json {",
            "<html>502 Bad Gateway</html>",
            "[1, 2, 3]",
            '{"jsonrpc":"1.0","result":1,"id":1}',
            '{"jsonrpc":"2.0","result":1}',
            '{"jsonrpc":"2.0","result":1,"id":[1]}',
            '{"jsonrpc":"2.0","error":"boom","id":1}',
            '{"jsonrpc":"2.0","error":{"code":"x","message":"m"},"id":1}',
            '{"jsonrpc":"2.0","error":{"code":1},"id":1}',
            '{"jsonrpc":"2.0","error":{"code":1,"message":"m","data":{"a":1}},"id":1}',
        ],
    )
    def test_invalid_payloads(self, body: str):
        with pytest.raises(UnsupportedPayloadError):
            parse_response(body)


class TestDecodeResult:
    """Tests for decode_result against caller types."""

    def test_list_of_models(self):
        groups = decode_result([{"groupid": "1", "name": "Templates"}], list[HostGroup])

        assert groups == [HostGroup(group_id="1", name="Templates")]

    def test_any_returns_plain_data(self):
        value: Any = {"a": [1, 2]}

        assert decode_result(value, Any) == value

    def test_custom_model(self):
        class Version(BaseModel):
            major: int

        assert decode_result({"major": 7}, Version).major == 7

    def test_shape_mismatch_is_unsupported_payload(self):
        with pytest.raises(UnsupportedPayloadError):
            decode_result({"not": "a list"}, list[HostGroup])

    def test_wrong_scalar_type(self):
        with pytest.raises(UnsupportedPayloadError):
            decode_result(["x"], str)
