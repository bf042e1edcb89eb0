"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class HandlerNameProcessor:
    """structlog processor that renders handler objects as readable names.

    Dispatch log events carry the handler objects themselves under
    ``handler`` / ``handlers``; this turns modules, classes and instances into
    the same display names used in :class:`~warden.kernel.errors.DispatchError`.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from warden.application.dispatch.chain import describe_handler

        if "handler" in event_dict and not isinstance(event_dict["handler"], str):
            event_dict["handler"] = describe_handler(event_dict["handler"])
        handlers = event_dict.get("handlers")
        if isinstance(handlers, (list, tuple)):
            event_dict["handlers"] = [
                h if isinstance(h, str) else describe_handler(h) for h in handlers
            ]
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["HandlerNameProcessor", "get_logger"]
