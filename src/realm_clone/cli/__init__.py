"""Command-line interface for realm-clone."""

from .app import app, main

__all__ = ["app", "main"]
