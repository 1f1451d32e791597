"""Top-level Textual application."""
from __future__ import annotations

from typing import Optional

from textual.app import App
from textual.binding import Binding

from slackchat.settings import Settings, load_settings
from slackchat.transcript import Transcript

from .transcript_screen import TranscriptScreen


class TranscriptApp(App):
    """Read-only viewer that renders a Slack transcript with mrkdwn styling."""

    TITLE = "slackchat"
    BINDINGS = [Binding("ctrl+q", "quit", "Quit")]

    def __init__(self, transcript: Transcript, settings: Optional[Settings] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.transcript = transcript
        self.settings = settings or load_settings()

    def on_mount(self) -> None:
        self.push_screen(TranscriptScreen(self.transcript, self.settings))
