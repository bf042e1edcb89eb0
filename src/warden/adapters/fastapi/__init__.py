"""FastAPI adapter – request context, step dependencies and error mapping."""
from warden.adapters.fastapi.context import context_from_request
from warden.adapters.fastapi.dependencies import enforce_dependency, load_dependency
from warden.adapters.fastapi.exception_mapper import FastAPIExceptionMapper

__all__ = [
    "FastAPIExceptionMapper",
    "context_from_request",
    "enforce_dependency",
    "load_dependency",
]
