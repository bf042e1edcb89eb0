"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── WardenError
        ├── ConfigurationError          (configuration.py)
        │   ├── MissingRequiredSettingError
        │   ├── InvalidSettingValueError
        │   └── ControllerRequiredError
        ├── DispatchError               (dispatch.py)
        ├── ProtocolViolationError      (dispatch.py)
        ├── LoadTimeoutError            (dispatch.py)
        ├── PolicyFailedError           (failures.py)
        └── LoadFailedError             (failures.py)
"""

from warden.kernel.errors.base import BaseError, WardenError
from warden.kernel.errors.configuration import (
    ConfigurationError,
    ControllerRequiredError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from warden.kernel.errors.dispatch import DispatchError, LoadTimeoutError, ProtocolViolationError
from warden.kernel.errors.failures import LoadFailedError, PolicyFailedError

__all__ = [
    "BaseError",
    "ConfigurationError",
    "ControllerRequiredError",
    "DispatchError",
    "InvalidSettingValueError",
    "LoadFailedError",
    "LoadTimeoutError",
    "MissingRequiredSettingError",
    "PolicyFailedError",
    "ProtocolViolationError",
    "WardenError",
]
