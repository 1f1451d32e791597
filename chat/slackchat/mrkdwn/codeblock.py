"""Fenced code blocks: fence decoration + Pygments highlighting as Rich markup."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ._utils import decode_slack_escapes, escape, join_markup
from .colors import MarkdownColors
from .segments import Segment

log = logging.getLogger(__name__)

FENCE = "```"


@lru_cache(maxsize=32)
def _style(name: str) -> Optional[StyleMeta]:
    if not name:
        return None
    try:
        return get_style_by_name(name)
    except ClassNotFound:
        log.debug("Unknown syntax theme %r, code left unhighlighted", name)
        return None


def _lexer(language: str) -> Lexer:
    if language:
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            log.debug("No lexer for %r, using plain text", language)
    return TextLexer(stripnl=False, ensurenl=False)


def _token_style(style: StyleMeta, ttype) -> str:
    token_style = style.style_for_token(ttype)
    words = [attr for attr in ("bold", "italic", "underline") if token_style.get(attr)]
    if token_style.get("color"):
        words.append(f"#{token_style['color']}")
    return " ".join(words)


def highlight(code: str, language: str, theme: str) -> str:
    """Return *code* as Rich markup coloured with the Pygments style *theme*."""
    style = _style(theme)
    if style is None:
        return escape(code, before_markup=False)

    parts: List[Tuple[bool, str]] = []
    for ttype, value in _lexer(language).get_tokens(code):
        rich_style = _token_style(style, ttype)
        if rich_style and value.strip():
            parts.append((True, f"[{rich_style}]{escape(value)}[/{rich_style}]"))
        else:
            parts.append((False, value))
    return join_markup(parts)


def render_code_block(segment: Segment, theme: str, colors: MarkdownColors) -> str:
    body = decode_slack_escapes(segment.body)
    if body.endswith("\n"):
        body = body[:-1]

    fence = colors.code_fence.wrap(FENCE)
    head = fence
    if segment.language:
        head += colors.code_fence.wrap(escape(segment.language))
    return f"{head}\n{highlight(body, segment.language, theme)}\n{fence}"
