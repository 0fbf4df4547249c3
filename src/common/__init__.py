"""Shared helpers used across the association and versioning packages."""
