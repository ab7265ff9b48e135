# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "trie_explorer.json"

DEFAULTS = {
    "suggestion_limit": 10,    # autocomplete results per query
    "structure_depth": 7,      # levels drawn in the tree diagram
    "load_initial_words": True,
    "message_timeout": 3.0,    # seconds a TUI status message stays up
    "word_order": "asc",
    "log_path": os.path.join("logs", "trie_explorer.log"),
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH, autosave=True):
        self.path = path
        self.autosave = autosave
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("could not read config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: expected a JSON object", self.path)
                return
            self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})
        elif self.autosave:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def items(self):
        return self.data.items()

    def set(self, key, val) -> bool:
        """Coerce `val` to the default's type and store it. False if rejected."""
        if key not in DEFAULTS:
            return False
        kind = type(DEFAULTS[key])
        try:
            if kind is bool and isinstance(val, str):
                low = val.strip().lower()
                if low not in _TRUE | _FALSE:
                    return False
                val = low in _TRUE
            else:
                val = kind(val)
        except (TypeError, ValueError):
            return False
        self.data[key] = val
        if self.autosave:
            self.save()
        return True
