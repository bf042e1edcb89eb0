"""Application handlers – composition helpers for policy and loader objects."""
from warden.application.handlers.sets import PolicySet, ResourceSet

__all__ = ["PolicySet", "ResourceSet"]
