"""Command line interface."""

from reprcheck.presentation.cli.app import app, main

__all__ = ["app", "main"]
