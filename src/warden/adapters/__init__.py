"""Adapters – host-framework integrations (imported on demand)."""
