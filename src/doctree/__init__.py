"""Doctree - navigation ordering for documentation trees."""
