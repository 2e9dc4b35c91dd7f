"""Shared schemas and errors."""
