"""Slack mrkdwn -> Rich markup rendering.

Public surface used by the message list, thread view and pickers:
``render``, ``lookup_emoji``, ``emoji_entries``, ``default_markdown_colors``
and ``split_code_blocks``.
"""
from .colors import (
    MarkdownColors,
    NO_STYLE,
    StyleTag,
    builtin_markdown_colors,
    builtin_theme_names,
    default_markdown_colors,
    is_defaultish,
)
from .emoji import EMOJI_TABLE, EmojiTable, emoji_entries, lookup_emoji
from .render import render
from .segments import Segment, split_code_blocks

__all__ = [
    "EMOJI_TABLE",
    "EmojiTable",
    "MarkdownColors",
    "NO_STYLE",
    "Segment",
    "StyleTag",
    "builtin_markdown_colors",
    "builtin_theme_names",
    "default_markdown_colors",
    "emoji_entries",
    "is_defaultish",
    "lookup_emoji",
    "render",
    "split_code_blocks",
]
