"""slackchat TUI package.

Public surface: ``TranscriptApp`` (``from slackchat.tui import TranscriptApp``).
"""
from .app import TranscriptApp

__all__ = ["TranscriptApp"]
