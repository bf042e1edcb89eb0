"""Unit tests for structured logging helpers."""

from __future__ import annotations

import asyncio
import logging
import types

import pytest
import structlog
from structlog.testing import capture_logs

from warden.application.dispatch import Dispatcher, resolve_chain
from warden.kernel.errors import DispatchError
from warden.observability.logging import HandlerNameProcessor, JsonLoggerFactory, get_logger
from warden.testing.fakes import FakePolicyHandler


class TestHandlerNameProcessor:
    def test_renders_handler_objects(self) -> None:
        module = types.ModuleType("app.policies")
        event = HandlerNameProcessor()(None, "info", {"handler": module, "handlers": [module, "x"]})
        assert event["handler"] == "app.policies"
        assert event["handlers"] == ["app.policies", "x"]

    def test_leaves_strings(self) -> None:
        event = HandlerNameProcessor()(None, "info", {"handler": "already"})
        assert event["handler"] == "already"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("t", request_id="r1").info("thing.happened")
        assert logs[0]["request_id"] == "r1"
        assert logs[0]["event"] == "thing.happened"


class TestDispatchLogging:
    def test_unresolved_dispatch_logs_warning(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(DispatchError):
                asyncio.run(Dispatcher().dispatch(resolve_chain(), "policy", {}, "x", discriminator="x"))
        events = [e for e in logs if e["event"] == "dispatch.unresolved"]
        assert events[0]["log_level"] == "warning"
        assert events[0]["hook"] == "policy"

    def test_resolved_dispatch_logs_debug(self) -> None:
        handler = FakePolicyHandler()
        with capture_logs() as logs:
            asyncio.run(Dispatcher().dispatch(resolve_chain(handler), "policy", {}, "x", discriminator="x"))
        events = [e for e in logs if e["event"] == "dispatch.resolved"]
        assert events[0]["handler"] is handler


class TestJsonLoggerFactory:
    def teardown_method(self) -> None:
        structlog.reset_defaults()
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_configure_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure()
        get_logger("warden.test").info("configured", handler=types.ModuleType("app.loaders"))
        err = capsys.readouterr().err
        assert '"event": "configured"' in err
        assert '"handler": "app.loaders"' in err
