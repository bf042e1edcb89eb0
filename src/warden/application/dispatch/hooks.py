"""Application dispatch – hook names looked up on handler objects."""

POLICY = "policy"
POLICY_ERROR = "policy_error"
RESOURCE = "resource"
RESOURCE_ERROR = "resource_error"

__all__ = ["POLICY", "POLICY_ERROR", "RESOURCE", "RESOURCE_ERROR"]
