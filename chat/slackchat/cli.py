from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape as markup_escape

from slackchat import logging_setup
from slackchat.models import UserRecord, load_channel_map, load_user_map
from slackchat.mrkdwn import builtin_markdown_colors, builtin_theme_names, emoji_entries, render
from slackchat.settings import load_settings
from slackchat.transcript import load_transcript

log = logging.getLogger(__name__)


def _read_json_map(path: Optional[str], label: str) -> dict:
    if not path:
        return {}
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{label} file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{label} file {path} must hold a JSON object")
    return data


def _load_users(path: Optional[str]) -> Dict[str, UserRecord]:
    return load_user_map(_read_json_map(path, "--users"))


def _load_channels(path: Optional[str]) -> Dict[str, str]:
    return load_channel_map(_read_json_map(path, "--channels"))


def cmd_render(args: argparse.Namespace) -> None:
    settings = load_settings()
    text = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()
    colors = builtin_markdown_colors(args.theme) if args.theme else settings.markdown_colors()
    out = render(
        text,
        _load_users(args.users),
        _load_channels(args.channels),
        enabled=settings.markdown_enabled and not args.plain,
        syntax_theme=args.syntax_theme if args.syntax_theme is not None else settings.syntax_theme,
        colors=colors,
    )
    if args.markup:
        sys.stdout.write(out + "\n")
        return
    Console().print(out, markup=True, emoji=False, highlight=False)


def cmd_emoji(args: argparse.Namespace) -> None:
    entries = emoji_entries()
    names: List[str] = sorted(n for n in entries if not args.query or args.query in n)
    if args.limit:
        names = names[:args.limit]
    console = Console()
    for name in names:
        console.print(f"{entries[name]}  :{markup_escape(name)}:", highlight=False, emoji=False)
    if not names:
        print("No matching shortcodes.")


def cmd_themes(args: argparse.Namespace) -> None:
    for name in builtin_theme_names():
        print(name)


def cmd_view(args: argparse.Namespace) -> None:
    from slackchat.tui import TranscriptApp
    TranscriptApp(load_transcript(Path(args.transcript))).run()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slackchat", description="Slack mrkdwn rendering for the terminal")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("render", help="Render mrkdwn text (file or stdin) to the terminal")
    sp.add_argument("file", nargs="?", help="Text file (default: stdin)")
    sp.add_argument("--plain", action="store_true", help="Resolve mentions/emoji but apply no styling")
    sp.add_argument("--theme", help="Built-in markdown theme (default: from settings)")
    sp.add_argument("--syntax-theme", help="Pygments style for code blocks (default: from settings)")
    sp.add_argument("--users", help="JSON file: user id -> Slack user object")
    sp.add_argument("--channels", help="JSON file: channel id -> name")
    sp.add_argument("--markup", action="store_true", help="Print the Rich markup instead of styled output")
    sp.set_defaults(func=cmd_render)

    sp = sub.add_parser("emoji", help="List known emoji shortcodes")
    sp.add_argument("query", nargs="?", default="", help="Substring filter")
    sp.add_argument("--limit", type=int, default=0, help="Max rows (0 = all)")
    sp.set_defaults(func=cmd_emoji)

    sp = sub.add_parser("themes", help="List built-in markdown themes")
    sp.set_defaults(func=cmd_themes)

    sp = sub.add_parser("view", help="Open a transcript JSON in the Textual viewer")
    sp.add_argument("transcript", help="Transcript JSON file")
    sp.set_defaults(func=cmd_view)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging_setup.configure()
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        log.debug("%s failed", args.cmd, exc_info=True)
        print(f"slackchat {args.cmd}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
