"""Inline mrkdwn -> Rich markup.

Each line goes through a fixed sequence of passes over a working string in
which already-rendered pieces are stashed behind placeholders (see
``Fragments``):

1. inline code spans
2. ``<...>`` entity tokens, then Slack's ``&lt; &gt; &amp;`` decoding
3. blockquote marker
4. ``*bold*`` ``_italic_`` ``~strike~``
5. ``:emoji:`` shortcodes
6. placeholder expansion + escaping of the remaining caller text

With styling disabled, passes 2 and 5 still run (they change what the text
says) while 1, 3 and 4 leave their source characters exactly as typed.
"""
from __future__ import annotations

import dataclasses
import re
from typing import List, Mapping

from slackchat.config import BLOCKQUOTE_GLYPH
from slackchat.models import UserRecord

from ._utils import Fragments, decode_slack_escapes, join_markup
from ._utils import escape as _escape
from .colors import BOLD, ITALIC, NO_STYLE, STRIKE, MarkdownColors, StyleTag
from .emoji import EMOJI_TABLE, EmojiTable
from .entities import Entity, resolve, scan_entities

_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
_BLOCKQUOTE_RE = re.compile(r"[ \t]*>[ ]?")

# Delimiters may not touch a word character on the outside, and the content
# may not start or end with whitespace: keeps snake_case and :a_b_c: intact.
_BOLD_RE = re.compile(r"(?<!\w)\*(?!\s)([^*\n]+?)(?<!\s)\*(?!\w)")
_ITALIC_RE = re.compile(r"(?<!\w)_(?!\s)([^_\n]+?)(?<!\s)_(?!\w)")
_STRIKE_RE = re.compile(r"(?<!\w)~(?!\s)([^~\n]+?)(?<!\s)~(?!\w)")

_EMOJI_RE = re.compile(r":([a-zA-Z0-9_+\-]+):")

_ENTITY_STYLE_FIELDS = {
    "user": "user_mention",
    "channel": "channel_mention",
    "special": "special_mention",
}


@dataclasses.dataclass(frozen=True)
class RenderContext:
    users: Mapping[str, UserRecord]
    channels: Mapping[str, str]
    colors: MarkdownColors
    enabled: bool = True
    emoji: EmojiTable = EMOJI_TABLE

    def entity_style(self, kind: str) -> StyleTag:
        return getattr(self.colors, _ENTITY_STYLE_FIELDS.get(kind, "link"))


def render_inline(text: str, ctx: RenderContext) -> str:
    """Render one non-code segment; lines are handled independently."""
    text = text.replace("\x00", "")  # reserved for placeholders
    return "\n".join(_render_line(line, ctx) for line in text.split("\n"))


def _render_line(line: str, ctx: RenderContext) -> str:
    frags = Fragments()

    line = _extract_code_spans(line, frags, ctx)
    line = _extract_entities(line, frags, ctx)

    quote = None
    if ctx.enabled:
        m = _BLOCKQUOTE_RE.match(line)
        if m:
            quote, line = m, line[m.end():]
        line = _apply_emphasis(line, frags)

    line = _EMOJI_RE.sub(lambda m: _emoji(m, frags, ctx), line)

    if quote is not None:
        line = _wrap_blockquote(line, frags, ctx)

    return join_markup(frags.expand(line))


def _styled(frags: Fragments, tag: StyleTag, text: str) -> str:
    if tag == NO_STYLE:
        return frags.text(text)
    return frags.markup(tag.wrap(_escape(text)))


def _extract_code_spans(line: str, frags: Fragments, ctx: RenderContext) -> str:
    def _replace(m: re.Match) -> str:
        if not ctx.enabled:
            return frags.text(decode_slack_escapes(m.group(0)))
        return _styled(frags, ctx.colors.inline_code, decode_slack_escapes(m.group(1)))

    return _INLINE_CODE_RE.sub(_replace, line)


def _extract_entities(line: str, frags: Fragments, ctx: RenderContext) -> str:
    out: List[str] = []
    for token in scan_entities(line):
        if isinstance(token, Entity):
            out.append(_entity(token, frags, ctx))
        else:
            out.append(decode_slack_escapes(token))
    return "".join(out)


def _entity(entity: Entity, frags: Fragments, ctx: RenderContext) -> str:
    display = resolve(entity, ctx.users, ctx.channels)
    if not ctx.enabled:
        return frags.text(display)
    return _styled(frags, ctx.entity_style(entity.kind), display)


def _apply_emphasis(line: str, frags: Fragments) -> str:
    for pattern, tag in ((_BOLD_RE, BOLD), (_ITALIC_RE, ITALIC), (_STRIKE_RE, STRIKE)):
        line = pattern.sub(
            lambda m, tag=tag: f"{frags.markup(tag.open)}{m.group(1)}{frags.markup(tag.close)}",
            line,
        )
    return line


def _emoji(m: re.Match, frags: Fragments, ctx: RenderContext) -> str:
    name = m.group(1)
    if name not in ctx.emoji:
        return m.group(0)
    return frags.text(ctx.emoji.lookup(name))


def _wrap_blockquote(line: str, frags: Fragments, ctx: RenderContext) -> str:
    colors = ctx.colors
    mark = frags.markup(colors.blockquote_mark.wrap(BLOCKQUOTE_GLYPH))
    if not line:
        return mark
    return f"{mark} {frags.markup(colors.blockquote_text.open)}{line}{frags.markup(colors.blockquote_text.close)}"
