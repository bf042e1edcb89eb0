"""Testing – doubles for exercising policies, loaders and pipelines."""
from warden.testing.fakes import FakePolicyHandler, FakeResourceHandler

__all__ = ["FakePolicyHandler", "FakeResourceHandler"]
