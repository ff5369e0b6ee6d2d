"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from kc_adapter.config import ConfigError
from kc_adapter.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DecodeError,
    DomainError,
    InfrastructureError,
    MalformedResponseError,
    NotDefinedError,
    ProviderError,
    TransportError,
    UnexpectedResponseError,
)


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        assert err.__cause__ is cause
        assert "original" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (NotDefinedError, DomainError),
            (ConflictError, DomainError),
            (ProviderError, ApplicationError),
            (UnexpectedResponseError, ApplicationError),
            (ConfigError, ApplicationError),
            (TransportError, InfrastructureError),
            (DecodeError, InfrastructureError),
            (MalformedResponseError, InfrastructureError),
        ],
    )
    def test_parent(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)


class TestNotDefinedError:
    def test_default_message(self) -> None:
        err = NotDefinedError("AccessToken")
        assert err.message == "AccessToken is missing"
        assert err.name == "AccessToken"
        assert err.code == "not_defined"


class TestProviderError:
    def test_fields_and_message(self) -> None:
        err = ProviderError("invalid_grant", "Code not valid")
        assert err.error == "invalid_grant"
        assert err.error_description == "Code not valid"
        assert err.message == "invalid_grant: Code not valid"
        assert err.detail == {"error": "invalid_grant", "error_description": "Code not valid"}

    def test_status_prefix(self) -> None:
        err = ProviderError("invalid_grant", "Code not valid", status_code=400)
        assert err.message == "HTTP 400: invalid_grant: Code not valid"
        assert err.status_code == 400

    def test_without_description(self) -> None:
        assert ProviderError("access_denied").message == "access_denied"


class TestOtherErrors:
    def test_unexpected_response(self) -> None:
        err = UnexpectedResponseError(status_code=200, body={"x": 1})
        assert err.code == "unexpected_response"
        assert err.body == {"x": 1}

    def test_conflict(self) -> None:
        err = ConflictError("User creation failed. HTTP response code: 409", status_code=409)
        assert err.status_code == 409
        assert err.code == "conflict"

    def test_transport_default_message(self) -> None:
        err = TransportError("http://kc/token")
        assert err.message == "Request to 'http://kc/token' failed"
        assert err.status_code is None

    def test_malformed_response(self) -> None:
        err = MalformedResponseError("expires_in")
        assert err.field == "expires_in"
        assert "expires_in" in err.message
