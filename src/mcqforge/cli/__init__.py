# src/mcqforge/cli/__init__.py
"""CLI package for mcqforge.

This package provides the command-line interface using Typer.
"""

from mcqforge.cli.app import app, console

__all__ = ["app", "console"]
