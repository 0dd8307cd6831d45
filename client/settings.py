"""Settings persistence: window preferences in settings.json, tour storage beside it."""

import os
import sys
import json

from shared.constants import DEFAULT_STORAGE_FILENAME


def _base_dir() -> str:
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    # Two levels up from client/settings.py -> project root
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _settings_path() -> str:
    return os.path.join(_base_dir(), 'settings.json')


def default_storage_path() -> str:
    return os.path.join(_base_dir(), DEFAULT_STORAGE_FILENAME)


def load_settings() -> dict:
    path = _settings_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {"fullscreen": False}
    except (OSError, ValueError):
        return {"fullscreen": False}


def save_settings(data: dict) -> None:
    path = _settings_path()
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        print(f"[app] Could not save settings: {e}")
