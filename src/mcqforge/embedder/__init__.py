# src/mcqforge/embedder/__init__.py
"""Embedding functionality for mcqforge."""

from mcqforge.embedder.base import Embedder
from mcqforge.embedder.client import ClientEmbedder
from mcqforge.embedder.similarity import cosine

__all__ = ["Embedder", "ClientEmbedder", "cosine"]
