"""Unit tests for RequestContext."""

from __future__ import annotations

import dataclasses

import pytest

from warden.kernel.context import RequestContext


class TestRequestContext:
    def test_defaults(self) -> None:
        ctx = RequestContext()
        assert dict(ctx.assigns) == {}
        assert dict(ctx.params) == {}
        assert ctx.controller is None
        assert ctx.router is None
        assert ctx.action is None
        assert ctx.halted is False
        assert ctx.status is None

    def test_assign_returns_copy(self) -> None:
        ctx = RequestContext(assigns={"a": 1})
        updated = ctx.assign("b", 2)
        assert dict(updated.assigns) == {"a": 1, "b": 2}
        assert dict(ctx.assigns) == {"a": 1}

    def test_assigns_are_read_only(self) -> None:
        ctx = RequestContext(assigns={"a": 1})
        with pytest.raises(TypeError):
            ctx.assigns["b"] = 2  # type: ignore[index]

    def test_caller_dict_is_copied(self) -> None:
        source = {"a": 1}
        ctx = RequestContext(assigns=source)
        source["a"] = 2
        assert ctx.assigns["a"] == 1

    def test_frozen(self) -> None:
        ctx = RequestContext()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.halted = True  # type: ignore[misc]

    def test_halt_and_status(self) -> None:
        ctx = RequestContext().put_status(404).halt()
        assert ctx.halted is True
        assert ctx.status == 404

    def test_merge_assigns(self) -> None:
        ctx = RequestContext(assigns={"a": 1}).merge_assigns({"a": 0, "b": 2})
        assert dict(ctx.assigns) == {"a": 0, "b": 2}

    def test_put_private(self) -> None:
        ctx = RequestContext().put_private("k", "v")
        assert ctx.private["k"] == "v"

    def test_with_handlers_keeps_unset_fields(self) -> None:
        controller = object()
        ctx = RequestContext(router="r").with_handlers(controller=controller, action="show")
        assert ctx.controller is controller
        assert ctx.router == "r"
        assert ctx.action == "show"
