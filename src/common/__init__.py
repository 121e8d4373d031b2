"""Shared helpers: logging setup and small text utilities."""
