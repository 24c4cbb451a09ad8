"""Unit tests for zabbix_api.core.errors module."""

import pytest

from zabbix_api.core.errors import (
    ApiCallError,
    BadRequestError,
    ConfigError,
    EmptyIdListError,
    IdParseError,
    NetworkError,
    PostprocessError,
    UnsupportedPayloadError,
    ZabbixApiError,
)
from zabbix_api.rpc.types import ErrorDetail


class TestZabbixApiError:
    def test_accepts_message(self):
        err = ZabbixApiError("Something went wrong")
        assert err.message == "Something went wrong"
        assert str(err) == "Something went wrong"

    @pytest.mark.parametrize(
        "cls",
        [
            ConfigError,
            NetworkError,
            UnsupportedPayloadError,
            BadRequestError,
            ApiCallError,
            PostprocessError,
            EmptyIdListError,
            IdParseError,
        ],
    )
    def test_all_kinds_inherit_from_base(self, cls):
        assert issubclass(cls, ZabbixApiError)


class TestKindsAreDistinct:
    """A handler for one kind never catches another."""

    def test_network_error_is_not_bad_request(self):
        assert not issubclass(NetworkError, BadRequestError)
        assert not issubclass(BadRequestError, NetworkError)

    def test_remote_error_is_not_transport_error(self):
        assert not issubclass(ApiCallError, (NetworkError, BadRequestError, UnsupportedPayloadError))

    def test_postprocess_is_separate(self):
        assert not issubclass(PostprocessError, (ApiCallError, BadRequestError))


class TestApiCallError:
    def test_keeps_remote_detail(self):
        detail = ErrorDetail(code=-32500, message="Application error.", data="No permissions.")
        err = ApiCallError(detail)

        assert err.error is detail
        assert err.code == -32500
        assert err.data == "No permissions."
        assert "-32500" in str(err)
        assert "Application error." in str(err)
        assert "No permissions." in str(err)

    def test_message_without_data(self):
        err = ApiCallError(ErrorDetail(code=-32600, message="Invalid request."))

        assert str(err) == "Zabbix API error -32600: Invalid request."


class TestOtherKinds:
    def test_bad_request_status(self):
        assert BadRequestError("x", status_code=404).status_code == 404
        assert BadRequestError("x").status_code is None

    def test_network_cause(self):
        cause = OSError("refused")
        assert NetworkError("x", cause=cause).cause is cause

    def test_id_parse_value(self):
        err = IdParseError("abc")
        assert err.value == "abc"
        assert "'abc'" in str(err)
