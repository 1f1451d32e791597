from __future__ import annotations

import os
from pathlib import Path

_state_dir_env = os.getenv("SLACKCHAT_STATE_DIR", "")
APP_DIR = Path(_state_dir_env).expanduser() if _state_dir_env else Path.home() / ".slackchat"
SETTINGS_FILE = APP_DIR / "settings.json"
LOG_DIR = APP_DIR / "logs"

LOG_LEVEL = os.getenv("SLACKCHAT_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("SLACKCHAT_LOG_FILE", "")

DEFAULT_SYNTAX_THEME = "monokai"
DEFAULT_THEME = "default"
BLOCKQUOTE_GLYPH = "▎"
