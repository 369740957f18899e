# simglass/preferences.py
"""
Persisted pilot preferences (selected aircraft type, SimBrief pilot id) in a
flat JSON key-value file.
"""
import json
import logging
import os
import tempfile
from typing import Any, Dict, Optional

DEFAULT_PREFERENCES_PATH = os.path.join(os.path.expanduser("~"), ".simglass", "preferences.json")

DEFAULTS = {
    'aircraft_type': "c172",
    'pilot_id': "",
}


class PreferenceStore:
    """Key-value store backed by a JSON file. A missing or corrupt file reads as empty."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_PREFERENCES_PATH
        self._values: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (IOError, json.JSONDecodeError) as e:
            logging.error(f"Could not read preferences from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logging.error(f"Ignoring preferences file {self.path}: expected a JSON object")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._values:
            return self._values[key]
        return DEFAULTS.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._save()

    def as_dict(self) -> Dict[str, Any]:
        merged = dict(DEFAULTS)
        merged.update(self._values)
        return merged

    def _save(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".preferences-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(self._values, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
