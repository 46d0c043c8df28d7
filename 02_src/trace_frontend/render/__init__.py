"""Trace rendering module."""

from .ui import to_display_format

__all__ = ["to_display_format"]
