# src/mcqforge/configuration/storage/__init__.py
"""Storage configurations for mcqforge."""

from mcqforge.configuration.storage.local import LocalStorage

__all__ = ["LocalStorage"]
