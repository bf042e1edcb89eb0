"""Unit tests for the Dispatcher."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from warden.application.dispatch import Dispatcher, resolve_chain
from warden.kernel.errors import DispatchError
from warden.kernel.protocol import NOT_APPLICABLE, OK


class Recorder:
    def __init__(self, response: Any = OK) -> None:
        self.response = response
        self.calls: list[tuple] = []

    def policy(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.response


class NoHooks:
    policy = "not callable"


class AsyncHandler:
    async def policy(self, assigns: Any, discriminator: Any) -> Any:
        await asyncio.sleep(0)
        return OK


class Raising:
    def policy(self, assigns: Any, discriminator: Any) -> Any:
        raise KeyError("boom")


def dispatch(chain: Any, hook: str = "policy", *args: Any, **kwargs: Any) -> Any:
    args = args or ({}, "x")
    return asyncio.run(Dispatcher().dispatch(chain, hook, *args, discriminator=args[-1], **kwargs))


class TestFirstMatchWins:
    def test_first_defining_handler_is_invoked(self) -> None:
        a, b = Recorder(), Recorder()
        result = dispatch(resolve_chain([a, b]))
        assert result.handler is a
        assert a.calls == [({}, "x")]
        assert b.calls == []

    def test_skips_handler_without_hook(self) -> None:
        b = Recorder()
        result = dispatch(resolve_chain([object(), NoHooks(), b]))
        assert result.handler is b
        assert result.response is OK


class TestFallthrough:
    def test_not_applicable_moves_to_next_handler(self) -> None:
        a, b = Recorder(NOT_APPLICABLE), Recorder()
        result = dispatch(resolve_chain([a, b]))
        assert result.handler is b
        assert len(a.calls) == 1

    def test_hook_exception_propagates(self) -> None:
        b = Recorder()
        with pytest.raises(KeyError):
            dispatch(resolve_chain([Raising(), b]))
        assert b.calls == []


class TestExhaustion:
    def test_non_empty_chain_raises(self) -> None:
        a = Recorder(NOT_APPLICABLE)
        with pytest.raises(DispatchError) as exc_info:
            dispatch(resolve_chain([a, object()]))
        err = exc_info.value
        assert err.hook == "policy"
        assert err.discriminator == "x"
        assert len(err.consulted) == 2

    def test_empty_chain_raises(self) -> None:
        with pytest.raises(DispatchError) as exc_info:
            dispatch(resolve_chain())
        assert exc_info.value.consulted == ()


class TestInvocation:
    def test_async_hook_is_awaited(self) -> None:
        result = dispatch(resolve_chain(AsyncHandler()))
        assert result.response is OK

    def test_offloaded_sync_hook(self) -> None:
        a = Recorder()
        result = dispatch(resolve_chain(a), offload=True)
        assert result.handler is a

    def test_handler_name(self) -> None:
        result = dispatch(resolve_chain(Recorder()))
        assert result.handler_name.endswith("Recorder instance>")
