"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog

from kc_adapter.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    RedactionProcessor,
    SensitiveFieldsFilter,
    get_logger,
)


class TestSensitiveFieldsFilter:
    def test_default_fields_cover_credentials(self) -> None:
        for key in ("client_secret", "refresh_token", "access_token", "password", "authorization"):
            assert key in DEFAULT_SENSITIVE_FIELDS

    def test_redact_flat(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({"refresh_token": "r1", "status": 200}) == {"refresh_token": "[REDACTED]", "status": 200}

    def test_redact_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Authorization": "Bearer x"}) == {"Authorization": "[REDACTED]"}

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter()
        data = {"form": {"grant_type": "password", "password": "pw", "inner": {"client_secret": "cs"}}}
        assert f.redact_deep(data) == {
            "form": {"grant_type": "password", "password": "[REDACTED]", "inner": {"client_secret": "[REDACTED]"}}
        }

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"email"}))
        assert f.redact({"email": "a@b.c", "password": "pw"}) == {"email": "[REDACTED]", "password": "pw"}


class TestRedactionProcessor:
    def test_masks_event_dict(self) -> None:
        processor = RedactionProcessor()
        out = processor(None, "info", {"event": "x", "access_token": "abc"})
        assert out == {"event": "x", "access_token": "[REDACTED]"}


class TestGetLogger:
    def test_bound_values_are_emitted(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("kc.test", realm="demo").info("hello", status=200)
        assert logs == [{"realm": "demo", "status": 200, "event": "hello", "log_level": "info"}]


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self) -> Any:
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_renders_json_with_redaction(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        structlog.get_logger("kc.json").info("keycloak.request", refresh_token="r1", grant_type="refresh_token")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "keycloak.request"
        assert record["refresh_token"] == "[REDACTED]"
        assert record["grant_type"] == "refresh_token"
        assert record["level"] == "info"

    def test_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
