"""Kernel context – the per-request value threaded through pipeline steps."""
from warden.kernel.context.request_context import RequestContext

__all__ = ["RequestContext"]
