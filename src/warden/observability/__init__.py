"""Observability – structured logging for the dispatch engine."""
