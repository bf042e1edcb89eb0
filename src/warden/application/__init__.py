"""Application layer – dispatch engine, pipeline steps and handler helpers."""
from warden.application.engine import Warden, default_warden, set_default_warden
from warden.application.handlers import PolicySet, ResourceSet
from warden.application.pipeline import Enforce, EnforceAction, Load, Pipeline

__all__ = [
    "Enforce",
    "EnforceAction",
    "Load",
    "Pipeline",
    "PolicySet",
    "ResourceSet",
    "Warden",
    "default_warden",
    "set_default_warden",
]
