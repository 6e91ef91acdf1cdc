"""Observability – structured logging for the credential pipeline."""
