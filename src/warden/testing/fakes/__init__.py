"""Testing fakes – configurable policy and loader handlers."""
from warden.testing.fakes.handlers import FakePolicyHandler, FakeResourceHandler

__all__ = ["FakePolicyHandler", "FakeResourceHandler"]
