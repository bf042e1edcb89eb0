"""Unit tests for the warden error hierarchy."""

from __future__ import annotations

import json

import pytest

from warden.kernel.errors import (
    BaseError,
    ConfigurationError,
    ControllerRequiredError,
    DispatchError,
    InvalidSettingValueError,
    LoadFailedError,
    LoadTimeoutError,
    MissingRequiredSettingError,
    PolicyFailedError,
    ProtocolViolationError,
    WardenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ConfigurationError, DispatchError, ProtocolViolationError, PolicyFailedError, LoadFailedError, LoadTimeoutError],
    )
    def test_warden_errors(self, cls: type) -> None:
        assert issubclass(cls, WardenError)
        assert issubclass(cls, BaseError)

    @pytest.mark.parametrize(
        "cls", [MissingRequiredSettingError, InvalidSettingValueError, ControllerRequiredError]
    )
    def test_configuration_errors(self, cls: type) -> None:
        assert issubclass(cls, ConfigurationError)


class TestDispatchError:
    def test_message_lists_consulted_handlers(self) -> None:
        err = DispatchError("policy", "missing", ["app.policies", "app.fallback"])
        assert "'policy'" in err.message
        assert "'missing'" in err.message
        assert "  app.policies\n  app.fallback" in err.message
        assert err.consulted == ("app.policies", "app.fallback")
        assert err.discriminator == "missing"
        assert err.code == "dispatch_error"

    def test_empty_chain_message(self) -> None:
        err = DispatchError("resource", "post")
        assert "(no handlers)" in err.message
        assert err.detail["consulted"] == []

    def test_str_is_json(self) -> None:
        err = DispatchError("policy", {"name": "test"}, ["h"])
        payload = json.loads(str(err))
        assert payload["code"] == "dispatch_error"
        assert payload["detail"]["discriminator"] == "{'name': 'test'}"


class TestProtocolViolationError:
    def test_message(self) -> None:
        err = ProtocolViolationError("policy", True, "OK or Error(data)", handler="h", discriminator="x")
        assert err.message == "'policy' from h must return OK or Error(data), got True"
        assert err.response is True
        assert err.detail["handler"] == "h"


class TestFailures:
    def test_policy_failed(self) -> None:
        err = PolicyFailedError("edit", "not owner", handler="h")
        assert err.policy == "edit"
        assert err.data == "not owner"
        assert err.to_dict()["code"] == "policy_failed"

    def test_load_failed(self) -> None:
        err = LoadFailedError("post", "gone")
        assert err.resource == "post"
        assert err.to_dict()["detail"]["data"] == "'gone'"

    def test_load_timeout(self) -> None:
        err = LoadTimeoutError(["a", "b"], 0.5)
        assert err.resources == ("a", "b")
        assert err.timeout == 0.5


class TestConfigurationErrors:
    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("WARDEN_X")
        assert err.setting_name == "WARDEN_X"
        assert "WARDEN_X" in err.message

    def test_invalid_setting(self) -> None:
        err = InvalidSettingValueError("protocol_mode", "loose", "bad")
        assert err.value == "loose"
        assert err.reason == "bad"

    def test_controller_required_default_message(self) -> None:
        assert ControllerRequiredError().message == "EnforceAction must run within a controller"


class TestSerialisation:
    def test_cause_included_by_default(self) -> None:
        err = WardenError("boom", cause=KeyError("k"))
        assert err.to_dict()["cause"] == "KeyError('k')"
        assert err.__cause__ is err.cause

    def test_cause_can_be_omitted(self) -> None:
        err = WardenError("boom", cause=KeyError("k"))
        assert "cause" not in err.to_dict(include_cause=False)
