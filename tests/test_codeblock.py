"""Tests for fenced code block rendering through render()."""

import pytest
from rich.text import Text

from slackchat.mrkdwn import render
from slackchat.mrkdwn.codeblock import highlight


def plain(markup: str) -> str:
    return Text.from_markup(markup, emoji=False).plain


def test_styled_fences(colors):
    got = render('```\nfmt.Println("hello")\n```', None, None, True, "monokai", colors)
    assert got.startswith("[grey50]```[/grey50]\n")
    assert got.endswith("\n[grey50]```[/grey50]")
    assert "Println" in got


def test_language_is_decorated(colors):
    got = render("```go\npackage main\n```", None, None, True, "monokai", colors)
    assert got.startswith("[grey50]```[/grey50][grey50]go[/grey50]\n")
    assert "package" in got


@pytest.mark.parametrize(
    "text",
    [
        "```\nplain body\n```",
        "```python\ndef f(x):\n    return x * 2\n```",
        "```go\npackage main\n\nfunc main() {}\n```",
        "```nosuchlang\n[red] stays text\n```",
    ],
)
def test_visible_text_matches_source(text, colors):
    got = render(text, None, None, True, "monokai", colors)
    assert plain(got) == text


def test_without_theme_body_is_not_highlighted(colors):
    got = render("```py\nx = 1\n```", None, None, True, "", colors)
    assert got == "[grey50]```[/grey50][grey50]py[/grey50]\nx = 1\n[grey50]```[/grey50]"


def test_unknown_theme_behaves_like_no_theme(colors):
    want = render("```py\nx = 1\n```", None, None, True, "", colors)
    assert render("```py\nx = 1\n```", None, None, True, "no-such-style", colors) == want


def test_monokai_colours_keywords(colors):
    got = render("```python\ndef f():\n    pass\n```", None, None, True, "monokai", colors)
    assert "#66d9ef" in got


def test_inline_rules_do_not_apply_inside_block(users, colors):
    got = render("```\n*x* <@U1> :fire:\n```", users, None, True, "", colors)
    assert "[bold]" not in got
    assert "@Alice" not in got
    assert "🔥" not in got
    assert "*x* <@U1> :fire:" in got


def test_text_around_block_is_still_inline_rendered(colors):
    got = render("*a*\n```\nb\n```\n_c_", None, None, True, "", colors)
    assert got.startswith("[bold]a[/bold]\n[grey50]```[/grey50]")
    assert got.endswith("[grey50]```[/grey50]\n[italic]c[/italic]")


def test_slack_escapes_decoded_in_block(colors):
    got = render("```\nif a &lt; b &amp;&amp; c\n```", None, None, True, "", colors)
    assert "if a < b && c" in got


def test_unterminated_fence_renders_inline(colors):
    got = render("```\n*x*", None, None, True, "", colors)
    assert got == "```\n[bold]x[/bold]"


def test_highlight_escapes_markup_in_tokens():
    got = highlight('s = "[bold]"', "python", "monokai")
    assert plain(got) == 's = "[bold]"'


def test_code_on_opening_line_with_attached_close(colors):
    got = render("```def f():\n    return 1```", None, None, True, "", colors)
    assert got == "[grey50]```[/grey50]\ndef f():\n    return 1\n[grey50]```[/grey50]"


def test_attached_close_is_not_inline_rendered(colors):
    got = render("```\n*x* :fire:```", None, None, True, "", colors)
    assert "[bold]" not in got
    assert "*x* :fire:" in got


def test_attached_close_round_trips_when_disabled(colors):
    text = "```def f():\n    return *1*```"
    assert render(text, None, None, False, "", colors) == text
