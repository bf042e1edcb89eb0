"""Unit tests for the handler response vocabulary."""

from __future__ import annotations

from warden.kernel.protocol import (
    NOT_APPLICABLE,
    OK,
    Continue,
    Error,
    Fail,
    Loaded,
    ProtocolMode,
    ResourceBinding,
)


class TestResponses:
    def test_sentinels_are_distinct(self) -> None:
        assert OK is not NOT_APPLICABLE
        assert repr(OK) == "OK"
        assert repr(NOT_APPLICABLE) == "NOT_APPLICABLE"

    def test_error_defaults_to_none(self) -> None:
        assert Error().data is None
        assert Error("x") == Error("x")

    def test_loaded_equality(self) -> None:
        assert Loaded("post", 1) == Loaded("post", 1)
        assert Loaded("post", 1) != Loaded("post", 2)

    def test_match_on_responses(self) -> None:
        def describe(response: object) -> str:
            match response:
                case Loaded(name, _):
                    return f"loaded {name}"
                case Error(data):
                    return f"error {data}"
                case _:
                    return "other"

        assert describe(Loaded("post", 1)) == "loaded post"
        assert describe(Error("gone")) == "error gone"
        assert describe(OK) == "other"


class TestOutcome:
    def test_continue_defaults(self) -> None:
        outcome = Continue()
        assert outcome.context is None
        assert outcome.binding is None

    def test_fail_carries_data(self) -> None:
        assert Fail("x").data == "x"

    def test_binding(self) -> None:
        assert Continue(binding=ResourceBinding("a", 1)).binding == ResourceBinding("a", 1)


class TestProtocolMode:
    def test_from_string(self) -> None:
        assert ProtocolMode("strict") is ProtocolMode.STRICT
        assert ProtocolMode("legacy") is ProtocolMode.LEGACY
