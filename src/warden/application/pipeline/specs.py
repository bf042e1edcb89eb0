"""Application pipeline – step option normalization."""
from __future__ import annotations

from typing import Any

from warden.kernel.errors import ConfigurationError


def as_spec_list(value: Any, option: str = "policies") -> list[Any]:
    """Normalize a bare discriminator or a list of them to a list.

    Only ``list`` is treated as "many"; tuples, dicts and other values are
    single discriminators.

    Raises:
        ConfigurationError: *value* is an empty list.
    """
    if isinstance(value, list):
        if not value:
            raise ConfigurationError(
                f"'{option}' must name at least one entry",
                detail={"option": option},
            )
        return list(value)
    return [value]


__all__ = ["as_spec_list"]
