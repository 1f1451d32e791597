"""``render``: the single entry point from raw mrkdwn to Rich markup."""
from __future__ import annotations

from typing import Mapping, Optional

from slackchat.models import UserRecord

from ._utils import decode_slack_escapes, escape
from .codeblock import render_code_block
from .colors import MarkdownColors, default_markdown_colors, is_defaultish
from .inline import RenderContext, render_inline
from .segments import split_code_blocks


def render(
    text: str,
    users: Optional[Mapping[str, UserRecord]] = None,
    channels: Optional[Mapping[str, str]] = None,
    enabled: bool = True,
    syntax_theme: str = "",
    colors: Optional[MarkdownColors] = None,
) -> str:
    """Convert Slack mrkdwn *text* to Rich markup for a ``RichLog``/``Static``.

    *users* and *channels* resolve ``<@U..>`` / ``<#C..>`` mentions; missing
    entries fall back to the raw ID. With *enabled* False, mentions, links
    and emoji are still resolved but no styling is applied and mrkdwn
    punctuation is left as typed. A ``None`` or all-unset *colors* scheme
    means ``default_markdown_colors()``.

    Pure function of its arguments: safe to call on every redraw.
    """
    if not text:
        return ""
    if is_defaultish(colors):
        colors = default_markdown_colors()
    ctx = RenderContext(
        users=users or {},
        channels=channels or {},
        colors=colors,
        enabled=enabled,
    )

    out = []
    for segment in split_code_blocks(text):
        if not segment.is_code:
            out.append(render_inline(segment.text, ctx))
        elif enabled:
            out.append(render_code_block(segment, syntax_theme, colors))
        else:
            out.append(escape(decode_slack_escapes(segment.source()), before_markup=False))
    return "".join(out)
