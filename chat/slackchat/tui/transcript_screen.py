"""Message log screen for a loaded transcript."""
from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, RichLog

from slackchat.models import Message
from slackchat.mrkdwn import lookup_emoji, render
from slackchat.mrkdwn._utils import escape
from slackchat.settings import Settings
from slackchat.transcript import Transcript

from ._utils import _author_color, _fmt_ts


class TranscriptScreen(Screen):
    """Scrollable, rendered view of every message in a transcript."""

    BINDINGS = [
        Binding("f2", "toggle_markdown", "Markdown on/off"),
        Binding("ctrl+q", "app.quit", "Quit"),
    ]

    DEFAULT_CSS = """
    TranscriptScreen {
        layout: vertical;
    }
    #message-log {
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, transcript: Transcript, settings: Settings, **kwargs) -> None:
        super().__init__(**kwargs)
        self.transcript = transcript
        self.settings = settings
        self.markdown_enabled = settings.markdown_enabled
        self._colors = settings.markdown_colors()

    def compose(self) -> ComposeResult:
        yield Header()
        yield RichLog(id="message-log", markup=True, wrap=True, auto_scroll=True, highlight=False)
        yield Footer()

    def on_mount(self) -> None:
        self._update_title()
        self._load_history()

    def _update_title(self) -> None:
        mode = "markdown" if self.markdown_enabled else "plain"
        label = self.transcript.title or "transcript"
        self.title = f"slackchat  {label} | {len(self.transcript.messages)} messages | {mode}"

    # ── Message log ───────────────────────────────────────────────────────────

    def _load_history(self) -> None:
        log = self.query_one("#message-log", RichLog)
        log.clear()
        for m in self.transcript.messages:
            log.write(self._fmt(m))

    def _fmt(self, m: Message) -> str:
        ts = _fmt_ts(m.ts)
        author = self.transcript.author_name(m.user)
        user = self.transcript.users.get(m.user)
        if user is not None and user.status_emoji:
            author += " " + lookup_emoji(user.status_emoji.strip(":"))
        author = escape(author)
        body = render(
            m.text,
            self.transcript.users,
            self.transcript.channels,
            self.markdown_enabled,
            self.settings.syntax_theme,
            self._colors,
        )
        color = _author_color(m.user)
        prefix = f"[dim]{ts}[/dim] " if ts else ""
        return f"{prefix}[bold {color}]{author}[/bold {color}]: {body}"

    def action_toggle_markdown(self) -> None:
        self.markdown_enabled = not self.markdown_enabled
        self._update_title()
        self._load_history()
