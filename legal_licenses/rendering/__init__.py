"""Markdown rendering for the licenses document."""

from .builder import DocumentBuilder

__all__ = ["DocumentBuilder"]
