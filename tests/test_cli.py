"""Tests for the slackchat command line."""

import json

import pytest

import slackchat.config as cfg
from slackchat.cli import build_parser, main


@pytest.fixture
def message_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "msg.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def test_render_prints_styled_text(message_file, capsys):
    assert main(["render", message_file("*hello* world")]) == 0
    assert capsys.readouterr().out.strip() == "hello world"


def test_render_markup(message_file, capsys):
    assert main(["render", "--markup", message_file("*hello* world")]) == 0
    assert capsys.readouterr().out == "[bold]hello[/bold] world\n"


def test_render_plain_keeps_markers(message_file, capsys):
    assert main(["render", "--plain", "--markup", message_file("*hi* :fire:")]) == 0
    assert capsys.readouterr().out == "*hi* 🔥\n"


def test_render_reads_stdin(monkeypatch, capsys):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("_x_"))
    assert main(["render", "--markup"]) == 0
    assert capsys.readouterr().out == "[italic]x[/italic]\n"


def test_render_with_lookup_files(tmp_path, message_file, capsys):
    users = tmp_path / "users.json"
    users.write_text(json.dumps({"U1": {"profile": {"display_name": "Alice"}}}), encoding="utf-8")
    channels = tmp_path / "channels.json"
    channels.write_text(json.dumps({"C1": "general"}), encoding="utf-8")
    argv = ["render", "--markup", "--users", str(users), "--channels", str(channels),
            message_file("<@U1> in <#C1>")]
    assert main(argv) == 0
    assert capsys.readouterr().out == "[bold yellow]@Alice[/bold yellow] in [bold cyan]#general[/bold cyan]\n"


def test_render_theme_option(message_file, capsys):
    assert main(["render", "--markup", "--theme", "monokai", message_file("<@U9>")]) == 0
    assert capsys.readouterr().out == "[bold #e6db74]@U9[/bold #e6db74]\n"


def test_render_settings_disable_markdown(message_file, capsys):
    cfg.SETTINGS_FILE.write_text('{"markdown_enabled": false}', encoding="utf-8")
    assert main(["render", "--markup", message_file("*a*")]) == 0
    assert capsys.readouterr().out == "*a*\n"


def test_render_missing_file(tmp_path, capsys):
    assert main(["render", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().err.startswith("slackchat render: ")


def test_render_bad_users_file(tmp_path, message_file, capsys):
    users = tmp_path / "users.json"
    users.write_text("[]", encoding="utf-8")
    assert main(["render", "--users", str(users), message_file("x")]) == 1
    assert "--users" in capsys.readouterr().err


def test_bad_settings_reported(message_file, capsys):
    cfg.SETTINGS_FILE.write_text("{", encoding="utf-8")
    assert main(["render", message_file("x")]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_emoji_filter(capsys):
    assert main(["emoji", "fire", "--limit", "1"]) == 0
    assert capsys.readouterr().out.strip() == "🔥  :fire:"


def test_emoji_no_match(capsys):
    assert main(["emoji", "zzzz-not-an-emoji"]) == 0
    assert capsys.readouterr().out.strip() == "No matching shortcodes."


def test_themes(capsys):
    assert main(["themes"]) == 0
    names = capsys.readouterr().out.split()
    assert "default" in names and "monokai" in names


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
