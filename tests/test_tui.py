"""Tests for the Textual transcript viewer."""

from textual.widgets import RichLog

from slackchat.models import Message, UserRecord
from slackchat.settings import Settings
from slackchat.transcript import Transcript
from slackchat.tui import TranscriptApp
from slackchat.tui._utils import _author_color, _fmt_ts


def make_transcript():
    return Transcript(
        users={"U1": UserRecord(display_name="Alice", status_emoji=":coffee:")},
        channels={"C1": "general"},
        messages=[
            Message(user="U1", text="*ship* it in <#C1>"),
            Message(user="U2", text="```\ncode\n```"),
        ],
        title="standup",
    )


async def test_history_is_rendered():
    app = TranscriptApp(make_transcript(), settings=Settings(syntax_theme=""))
    async with app.run_test() as pilot:
        await pilot.pause()
        log = app.screen.query_one("#message-log", RichLog)
        assert len(log.lines) >= 2
        assert "standup" in app.screen.title
        assert "markdown" in app.screen.title


async def test_fmt_message_line():
    app = TranscriptApp(make_transcript(), settings=Settings(syntax_theme=""))
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        color = _author_color("U1")
        line = screen._fmt(make_transcript().messages[0])
        assert line == (
            f"[bold {color}]Alice ☕[/bold {color}]: "
            "[bold]ship[/bold] it in [bold cyan]#general[/bold cyan]"
        )


async def test_f2_toggles_markdown():
    app = TranscriptApp(make_transcript(), settings=Settings(syntax_theme=""))
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.markdown_enabled is True
        await pilot.press("f2")
        assert screen.markdown_enabled is False
        assert "plain" in screen.title
        assert screen._fmt(make_transcript().messages[0]).endswith(": *ship* it in #general")
        await pilot.press("f2")
        assert screen.markdown_enabled is True


def test_author_color_is_stable():
    assert _author_color("U1") == _author_color("U1")


def test_fmt_ts():
    assert _fmt_ts("") == ""
    assert _fmt_ts("garbage") == ""
    assert len(_fmt_ts("1712345678.000200")) == 5
