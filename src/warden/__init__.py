"""
warden – Authorization and resource-loading pipeline steps.

Import path convention::

    from warden.kernel.protocol import OK, Error, Loaded, NOT_APPLICABLE
    from warden.kernel.context import RequestContext
    from warden.application import Warden
    from warden.application.pipeline import Enforce, Load, Pipeline
    from warden.adapters.fastapi import enforce_dependency
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
