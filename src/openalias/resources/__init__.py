"""Packaged schemas and templates."""
