"""Shared fixtures: isolated state dir, lookup tables, default colors."""

import pytest

import slackchat.config as cfg
from slackchat import logging_setup
from slackchat.models import UserRecord
from slackchat.mrkdwn import default_markdown_colors


@pytest.fixture(autouse=True)
def isolated_state_dir(tmp_path, monkeypatch):
    """Point settings and logs at a per-test directory."""
    monkeypatch.setattr(cfg, "APP_DIR", tmp_path)
    monkeypatch.setattr(cfg, "SETTINGS_FILE", tmp_path / "settings.json")
    monkeypatch.setattr(cfg, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(cfg, "LOG_FILE", "")
    yield tmp_path
    logging_setup.reset()


@pytest.fixture
def users():
    return {
        "U1": UserRecord(display_name="Alice", name="alice"),
        "U2": UserRecord(real_name="Bob Jones", name="bob"),
        "U3": UserRecord(name="charlie"),
    }


@pytest.fixture
def channels():
    return {"C1": "general", "C2": "random"}


@pytest.fixture
def colors():
    return default_markdown_colors()
