"""Persistence: JSON-encoded key/value record of seen tours and assistant settings.

Reads fall back to defaults on missing or corrupt data.  Writes update the
in-memory copy first and then hit the backend on a best-effort basis; a
failing backend is logged and never blocks a state transition.
"""

from __future__ import annotations
import json
import os
from typing import Any, Iterable, Optional
from shared.constants import KEY_SEEN_TOURS


class MemoryStorage:
    """Backend holding raw encoded strings in a dict (tests, ephemeral runs)."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage:
    """Backend storing every key in one JSON object file on disk."""

    def __init__(self, path: str):
        self.path = path
        self._items: Optional[dict[str, str]] = None

    def _load(self) -> dict[str, str]:
        if self._items is None:
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self._items = data if isinstance(data, dict) else {}
            except FileNotFoundError:
                self._items = {}
            except (OSError, ValueError) as e:
                print(f"[store] Unreadable storage {self.path}: {e}")
                self._items = {}
        return self._items

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(items, f, indent=2)


class PersistenceStore:
    def __init__(self, storage=None):
        self.storage = storage if storage is not None else MemoryStorage()
        # Encoded values written this run; authoritative even if the backend failed
        self._written: dict[str, str] = {}

    def _raw(self, key: str) -> Optional[str]:
        if key in self._written:
            return self._written[key]
        try:
            return self.storage.get_item(key)
        except Exception as e:
            print(f"[store] Read of {key} failed: {e}")
            return None

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._raw(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            print(f"[store] Corrupt value for {key}, using default")
            return default

    def set(self, key: str, value: Any) -> None:
        try:
            encoded = json.dumps(value, sort_keys=True)
        except (TypeError, ValueError) as e:
            print(f"[store] Cannot encode {key}: {e}")
            return
        if self._raw(key) == encoded:
            return
        self._written[key] = encoded
        try:
            self.storage.set_item(key, encoded)
        except Exception as e:
            print(f"[store] Write of {key} failed: {e}")

    # ------------------------------------------------------------------ #
    # Seen tours
    # ------------------------------------------------------------------ #

    def seen_tours(self) -> dict[str, bool]:
        record = self.get(KEY_SEEN_TOURS, {})
        if not isinstance(record, dict):
            return {}
        return {str(k): v for k, v in record.items() if isinstance(v, bool)}

    def has_seen(self, tour_name: str) -> bool:
        return self.seen_tours().get(tour_name, False)

    def mark_seen(self, tour_name: str) -> None:
        seen = self.seen_tours()
        if seen.get(tour_name) is True:
            return
        seen[tour_name] = True
        self.set(KEY_SEEN_TOURS, seen)

    def reset_seen(self, tour_names: Iterable[str] = ()) -> None:
        names = set(self.seen_tours()) | set(tour_names)
        self.set(KEY_SEEN_TOURS, {name: False for name in names})
